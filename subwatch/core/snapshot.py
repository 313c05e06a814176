"""快照存储：当前结果文件 + 上一次结果文件，支持读取、保存、比对与轮换"""
import os
from pathlib import Path
from typing import Iterable, List, NamedTuple

from ..utils.helpers import load_lines, store_lines, find_added, find_deleted
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ChangeSet(NamedTuple):
    added: List[str]
    deleted: List[str]

    def __bool__(self):
        return bool(self.added or self.deleted)


class SnapshotStore:
    """一对文件：current 保存本次结果，previous 保存上一次结果。

    rotate() 之后 previous 恰好等于本次结果，current 文件不再存在。
    """

    def __init__(self, current_path, previous_path):
        self.current_path = Path(current_path)
        self.previous_path = Path(previous_path)

    def load(self) -> List[str]:
        return load_lines(self.current_path)

    def load_previous(self) -> List[str]:
        return load_lines(self.previous_path)

    def save(self, lines: Iterable[str]) -> Path:
        return store_lines(lines, self.current_path)

    def diff(self) -> ChangeSet:
        current = self.load()
        previous = self.load_previous()
        return ChangeSet(find_added(current, previous), find_deleted(current, previous))

    def rotate(self) -> bool:
        """用 current 替换 previous"""
        if not self.current_path.exists():
            logger.warning(f"{self.current_path} 不存在，跳过轮换")
            return False
        os.replace(self.current_path, self.previous_path)
        return True

    def __repr__(self):
        return f"SnapshotStore({str(self.current_path)!r}, {str(self.previous_path)!r})"


def subdomain_store(workdir, domain: str) -> SnapshotStore:
    workdir = Path(workdir)
    return SnapshotStore(workdir / f"output.{domain}.txt", workdir / f"prev_output.{domain}.txt")


def service_store(workdir) -> SnapshotStore:
    workdir = Path(workdir)
    return SnapshotStore(workdir / 'httpx_res.txt', workdir / 'prev_httpx_res.txt')
