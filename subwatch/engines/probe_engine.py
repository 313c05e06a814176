"""服务探测引擎：子域列表 -> dnsx 解析 -> httpx 探测，原始输出写入结果文件"""
import subprocess
import tempfile
from pathlib import Path
from typing import List

from .base_engine import BaseEngine, EXIT_NOT_FOUND
from ..exceptions import ExternalToolError
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = ('Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:108.0) '
                      'Gecko/20100101 Firefox/108.0')


class ProbeEngine(BaseEngine):
    """以管道串联 dnsx 与 httpx（不经过 shell，参数均为 argv 列表）。

    httpx 跟随跨主机重定向、关闭彩色输出，并输出 title / 状态码 / CDN / 技术栈指纹。
    """

    name = 'httpx'

    def __init__(self, resolver_binary='dnsx', probe_binary='httpx',
                 user_agent=DEFAULT_USER_AGENT, workdir='.'):
        self.resolver_binary = resolver_binary
        self.probe_binary = probe_binary
        self.user_agent = user_agent
        self.workdir = Path(workdir)

    def resolver_command(self) -> List[str]:
        return [self.resolver_binary, '-silent']

    def probe_command(self) -> List[str]:
        return [
            self.probe_binary, '-silent',
            '-follow-host-redirects', '-nc',
            '-title', '-status-code', '-cdn', '-tech-detect',
            '-H', f"User-Agent: {self.user_agent}",
        ]

    def search(self, target: str, output_file=None) -> Path:
        """target 为子域列表文件，返回写入的结果文件路径"""
        output = Path(output_file) if output_file else self.workdir / 'httpx_res.txt'
        logger.debug(f"执行管道: cat {target} | {' '.join(self.resolver_command())} | "
                     f"{' '.join(self.probe_command())} > {output}")

        with open(target, 'r', encoding='utf-8') as fin, \
                open(output, 'w', encoding='utf-8') as fout, \
                tempfile.TemporaryFile('w+', encoding='utf-8') as dnsx_err:
            dnsx = self._spawn(self.resolver_command(), stdin=fin,
                               stdout=subprocess.PIPE, stderr=dnsx_err)
            try:
                httpx = self._spawn(self.probe_command(), stdin=dnsx.stdout,
                                    stdout=fout, stderr=subprocess.PIPE, text=True)
            except ExternalToolError:
                dnsx.kill()
                dnsx.wait()
                raise
            # 父进程不再持有管道读端，httpx 退出后 dnsx 能收到 SIGPIPE
            dnsx.stdout.close()
            _, httpx_stderr = httpx.communicate()
            dnsx_code = dnsx.wait()

            if dnsx_code != 0:
                dnsx_err.seek(0)
                raise ExternalToolError(self.resolver_binary, dnsx_code, dnsx_err.read())
            if httpx.returncode != 0:
                raise ExternalToolError(self.probe_binary, httpx.returncode, httpx_stderr)

        logger.info(f"{self.name} command executed successfully")
        return output

    @staticmethod
    def _spawn(command: List[str], **kwargs):
        try:
            return subprocess.Popen(command, **kwargs)
        except FileNotFoundError as e:
            raise ExternalToolError(command[0], EXIT_NOT_FOUND, str(e)) from e
