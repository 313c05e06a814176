"""辅助函数：逐行读写结果文件，以及按行去重/比对"""
from pathlib import Path
from typing import Iterable, List

from .logger import get_logger

logger = get_logger(__name__)

# httpx 的 title 来自任意网站，可能不是合法 UTF-8；用 surrogateescape 保证字节原样往返
ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


def split_lines(text: str) -> List[str]:
    """只按 \\n 切分并去掉行尾的 \\r，末尾换行不产生空元素"""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [l[:-1] if l.endswith('\r') else l for l in lines]


def load_lines(path) -> List[str]:
    """读取文件的每一行（去掉行尾换行符）。

    文件不存在或无法读取时返回空列表，视为“没有上一次的数据”。
    """
    p = Path(path)
    try:
        with p.open('r', encoding=ENCODING, errors=ERRORS, newline='') as f:
            return split_lines(f.read())
    except OSError as e:
        logger.debug(f"读取 {p} 失败，按空列表处理: {e}")
        return []


def store_lines(lines: Iterable[str], path):
    """覆盖写入文件，每个元素一行"""
    p = Path(path)
    with p.open('w', encoding=ENCODING, errors=ERRORS, newline='\n') as f:
        for line in lines:
            f.write(f"{line}\n")
    return p


def dedupe(items: Iterable[str]) -> List[str]:
    """去重并保持首次出现的顺序"""
    seen = set()
    out = []
    for it in items:
        if it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out


def find_added(current: Iterable[str], previous: Iterable[str]) -> List[str]:
    """current 中存在而 previous 中没有的条目，顺序跟随 current"""
    prev = set(previous)
    return [it for it in current if it not in prev]


def find_deleted(current: Iterable[str], previous: Iterable[str]) -> List[str]:
    """previous 中存在而 current 中没有的条目，顺序跟随 previous"""
    return find_added(previous, current)
