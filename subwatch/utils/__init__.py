"""工具集合"""

from .helpers import load_lines, store_lines, dedupe, find_added, find_deleted
from .http_client import HttpClient
from .logger import get_logger, setup_logging

__all__ = [
    "load_lines", "store_lines", "dedupe", "find_added", "find_deleted",
    "HttpClient", "get_logger", "setup_logging",
]
