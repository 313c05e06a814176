# -*- coding: utf-8 -*-
"""
subwatch包 - 子域名与 HTTP 服务变化监控

定期用 shuffledns 爆破子域名、用 dnsx + httpx 探测存活服务，
与上一次结果比对后，把每条新增/消失的记录推送到 webhook。

使用方法：
```python
from subwatch import Config, build_monitor

monitor = build_monitor(Config(), 'words.txt', 'example.com')
report = monitor.run('example.com')
```
"""

from .exceptions import ExternalToolError
from .core import (
    Config, ChangeSet, SnapshotStore, SubdomainMonitor, RunReport, build_monitor,
)
from .engines import BruteEngine, ProbeEngine
from .output import WebhookNotifier

# 版本信息
__version__ = '1.0.0'

__all__ = [
    # 调度
    'SubdomainMonitor',
    'RunReport',
    'build_monitor',
    # 配置与存储
    'Config',
    'ChangeSet',
    'SnapshotStore',
    # 引擎与通知
    'BruteEngine',
    'ProbeEngine',
    'WebhookNotifier',
    # 异常
    'ExternalToolError',
]
