"""引擎基类：定义引擎接口，并统一外部命令的执行与失败处理"""
import subprocess
from abc import ABC, abstractmethod
from typing import List

from ..exceptions import ExternalToolError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# 与 shell 约定一致：找不到命令
EXIT_NOT_FOUND = 127


class BaseEngine(ABC):
    name = 'engine'

    @abstractmethod
    def search(self, target: str):
        """对目标执行一次扫描，返回结果"""
        pass

    def _run(self, command: List[str], tool: str = None):
        """同步执行外部命令；非零退出时抛出 ExternalToolError"""
        tool = tool or command[0]
        logger.debug(f"执行命令: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise ExternalToolError(tool, EXIT_NOT_FOUND, str(e)) from e

        if result.returncode != 0:
            raise ExternalToolError(tool, result.returncode, result.stderr)
        logger.info(f"{tool} command executed successfully")
        return result
