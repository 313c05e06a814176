"""Engines package"""

from .base_engine import BaseEngine
from .brute_engine import BruteEngine
from .probe_engine import ProbeEngine, DEFAULT_USER_AGENT

__all__ = ["BaseEngine", "BruteEngine", "ProbeEngine", "DEFAULT_USER_AGENT"]
