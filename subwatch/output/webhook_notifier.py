"""Webhook 通知器：向 Discord 兼容的 webhook 发送 {"content": ...}"""
import requests

from .base_notifier import BaseNotifier
from ..utils.http_client import HttpClient
from ..utils.logger import get_logger

logger = get_logger(__name__)

SUBDOMAIN_ADDED = 'Subdomain Added'
SUBDOMAIN_DELETED = 'Subdomain Deleted'
SERVICE_CHANGE = 'Service change'


class WebhookNotifier(BaseNotifier):
    """webhook_url 为空时所有通知均为空操作（只记录日志）。

    发送失败只记录日志，不抛出、不重试。
    """

    def __init__(self, webhook_url=None, client: HttpClient = None):
        self.webhook_url = webhook_url or ''
        self.client = client

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    @staticmethod
    def format_message(kind: str, item: str) -> str:
        return f"{kind}: {item}"

    def notify(self, kind: str, item: str) -> bool:
        if not self.enabled:
            logger.info("未配置 webhook 地址，跳过通知")
            return False

        if self.client is None:
            self.client = HttpClient()

        payload = {'content': self.format_message(kind, item)}
        try:
            resp = self.client.post_json(self.webhook_url, payload)
        except requests.RequestException as e:
            logger.error(f"failed to send webhook notification: {e}")
            return False

        if resp.status_code >= 300:
            logger.error(f"webhook notification failed with status code: {resp.status_code}")
            return False
        return True

    def close(self):
        if self.client is not None:
            self.client.close()
