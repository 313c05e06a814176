"""Core package for monitor"""

from .config import Config
from .snapshot import ChangeSet, SnapshotStore, subdomain_store, service_store
from .monitor import SubdomainMonitor, RunReport, build_monitor

__all__ = ["Config", "ChangeSet", "SnapshotStore",
           "subdomain_store", "service_store", "SubdomainMonitor", "RunReport",
           "build_monitor"]
