"""字典爆破引擎：调用 shuffledns 对目标做子域名爆破，多次运行后合并结果"""
from pathlib import Path
from typing import List

from .base_engine import BaseEngine
from ..utils.helpers import load_lines
from ..utils.logger import get_logger

logger = get_logger(__name__)


class BruteEngine(BaseEngine):
    """shuffledns 单次运行结果不完整，因此重复 runs 次并拼接全部输出（由调用方去重）"""

    name = 'shuffledns'

    def __init__(self, wordlist_path, resolvers_path='resolvers.txt', runs=3,
                 binary='shuffledns', workdir='.'):
        self.wordlist_path = Path(wordlist_path)
        self.resolvers_path = Path(resolvers_path)
        self.runs = int(runs)
        self.binary = binary
        self.workdir = Path(workdir)

    def build_command(self, domain: str, output_file) -> List[str]:
        return [
            self.binary,
            '-w', str(self.wordlist_path),
            '-d', domain,
            '-r', str(self.resolvers_path),
            '-o', str(output_file),
            '-mode', 'bruteforce',
        ]

    def search(self, target: str) -> List[str]:
        out = []
        for i in range(self.runs):
            logger.info(f"Running shuffledns scan #{i + 1}...")
            tmp = self.workdir / f"output_{i}.txt"
            try:
                self._run(self.build_command(target, tmp), tool=self.name)
                out.extend(load_lines(tmp))
            finally:
                tmp.unlink(missing_ok=True)
        return out
