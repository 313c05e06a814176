"""配置管理：从 YAML 加载默认配置，并用环境变量覆盖 webhook 地址"""
import os
import yaml
from pathlib import Path

DEFAULT_CONFIG = Path(__file__).parents[1] / 'config' / 'default_config.yaml'


class Config:
    def __init__(self, path: str = None, environ=None):
        self.path = Path(path) if path else DEFAULT_CONFIG
        self._environ = os.environ if environ is None else environ
        self._data = {}
        self.load()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                self._data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self._data = {}

        # 环境变量优先于配置文件
        env_name = self._data.get('webhook_env') or 'DISCORD_TOKEN'
        url = self._environ.get(env_name)
        if url:
            self._data['webhook_url'] = url

    def get(self, key, default=None):
        value = self._data.get(key)
        return default if value is None else value

    def set(self, key, value):
        self._data[key] = value

    def as_dict(self):
        return dict(self._data)

    @property
    def workdir(self) -> Path:
        return Path(self.get('workdir', '.'))
