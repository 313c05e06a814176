"""简易 HTTP 客户端封装（requests 协议）"""
import requests


class HttpClient:
    def __init__(self, timeout=10, session=None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def post_json(self, url, payload, **kwargs):
        """以 JSON 体发送 POST 请求"""
        return self.session.post(url, json=payload, timeout=self.timeout, **kwargs)

    def close(self):
        self.session.close()
