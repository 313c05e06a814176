"""通知输出包"""
from .base_notifier import BaseNotifier
from .webhook_notifier import (
    WebhookNotifier, SUBDOMAIN_ADDED, SUBDOMAIN_DELETED, SERVICE_CHANGE,
)

__all__ = ["BaseNotifier", "WebhookNotifier",
           "SUBDOMAIN_ADDED", "SUBDOMAIN_DELETED", "SERVICE_CHANGE"]
