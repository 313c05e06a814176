"""异常定义：外部工具执行失败时抛出，由入口决定是否终止"""


class ExternalToolError(Exception):
    """外部工具（shuffledns / dnsx / httpx）非零退出"""

    def __init__(self, tool: str, exit_code: int, stderr: str = ''):
        self.tool = tool
        self.exit_code = exit_code
        self.stderr = stderr or ''
        msg = f"{tool} 执行失败，退出码 {exit_code}"
        if self.stderr.strip():
            msg += f": {self.stderr.strip()[:200]}"
        super().__init__(msg)
