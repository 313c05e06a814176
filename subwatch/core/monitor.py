"""监控调度：枚举 -> 去重 -> 比对 -> 通知 -> 轮换 -> 探测 -> 比对 -> 通知 -> 轮换

整个流程严格顺序执行；外部工具失败时 ExternalToolError 直接向上抛出，由入口决定终止。
"""
from typing import List, NamedTuple

from .snapshot import ChangeSet, SnapshotStore, subdomain_store, service_store
from ..engines.brute_engine import BruteEngine
from ..engines.probe_engine import ProbeEngine, DEFAULT_USER_AGENT
from ..output.base_notifier import BaseNotifier
from ..output.webhook_notifier import (
    WebhookNotifier, SUBDOMAIN_ADDED, SUBDOMAIN_DELETED, SERVICE_CHANGE,
)
from ..utils.helpers import dedupe
from ..utils.http_client import HttpClient
from ..utils.logger import get_logger

logger = get_logger(__name__)


class RunReport(NamedTuple):
    subdomains: ChangeSet
    services: ChangeSet
    subdomain_count: int
    service_count: int


class SubdomainMonitor:
    def __init__(self, brute_engine: BruteEngine, probe_engine: ProbeEngine,
                 notifier: BaseNotifier, subdomains: SnapshotStore, services: SnapshotStore):
        self.brute_engine = brute_engine
        self.probe_engine = probe_engine
        self.notifier = notifier
        self.subdomains = subdomains
        self.services = services

    def run(self, domain: str) -> RunReport:
        logger.info("Starting subdomain enumeration...")
        found = self.brute_engine.search(domain)

        logger.info("Consolidating and deduplicating results...")
        current = dedupe(found)
        self.subdomains.save(current)

        logger.info("Comparing subdomain lists...")
        sub_changes = self.subdomains.diff()
        self._report(sub_changes.added, "Subdomains Added:", SUBDOMAIN_ADDED)
        self._report(sub_changes.deleted, "Subdomains Deleted:", SUBDOMAIN_DELETED)

        logger.info("Updating previous subdomain list...")
        self.subdomains.rotate()

        logger.info("Starting HTTP service analysis...")
        self.probe_engine.search(str(self.subdomains.previous_path),
                                 output_file=self.services.current_path)

        logger.info("Comparing HTTP service scan results...")
        service_count = len(self.services.load())
        # 只通知新增服务，消失的服务不计算也不通知
        svc_changes = ChangeSet(self.services.diff().added, [])
        self._report(svc_changes.added, "Service changes:", SERVICE_CHANGE)

        logger.info("Updating previous HTTP service scan results...")
        self.services.rotate()

        logger.info("Process completed successfully.")
        return RunReport(sub_changes, svc_changes, len(current), service_count)

    def _report(self, items: List[str], heading: str, kind: str):
        if not items:
            return
        logger.info(heading)
        for item in items:
            logger.info(item)
        self.notifier.notify_all(kind, items)


def build_monitor(config, wordlist, domain: str) -> SubdomainMonitor:
    """按配置组装引擎、通知器与两组快照"""
    workdir = config.workdir
    brute = BruteEngine(
        wordlist_path=wordlist,
        resolvers_path=workdir / config.get('resolvers', 'resolvers.txt'),
        runs=config.get('runs', 3),
        binary=config.get('shuffledns_bin', 'shuffledns'),
        workdir=workdir,
    )
    probe = ProbeEngine(
        resolver_binary=config.get('dnsx_bin', 'dnsx'),
        probe_binary=config.get('httpx_bin', 'httpx'),
        user_agent=config.get('user_agent', DEFAULT_USER_AGENT),
        workdir=workdir,
    )
    notifier = WebhookNotifier(
        config.get('webhook_url'),
        client=HttpClient(timeout=config.get('http_timeout', 10)),
    )
    return SubdomainMonitor(brute, probe, notifier,
                            subdomain_store(workdir, domain), service_store(workdir))
