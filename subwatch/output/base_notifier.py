"""通知器基类"""
from abc import ABC, abstractmethod
from typing import Iterable


class BaseNotifier(ABC):
    @abstractmethod
    def notify(self, kind: str, item: str) -> bool:
        pass

    def notify_all(self, kind: str, items: Iterable[str]) -> int:
        """逐条发送，每个变化一条消息；返回成功送达的条数"""
        sent = 0
        for item in items:
            if self.notify(kind, item):
                sent += 1
        return sent

    def close(self):
        pass
