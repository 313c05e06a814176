"""Pytest configuration for subwatch."""
import io
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from subwatch.output.base_notifier import BaseNotifier


class FakeCompleted:
    def __init__(self, args, returncode=0, stdout='', stderr=''):
        self.args = args
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class FakeShuffledns:
    """替代 subprocess.run：按调用顺序把预设结果写入 -o 指定的文件"""

    def __init__(self, outputs, returncode=0, stderr=''):
        self.outputs = list(outputs)
        self.returncode = returncode
        self.stderr = stderr
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append(list(command))
        out_path = Path(command[command.index('-o') + 1])
        lines = self.outputs[len(self.calls) - 1] if len(self.calls) <= len(self.outputs) else []
        out_path.write_text(''.join(f"{l}\n" for l in lines), encoding='utf-8')
        return FakeCompleted(command, self.returncode, '', self.stderr)


class FakePopen:
    """替代 subprocess.Popen：dnsx 原样透传，httpx 给每行加上状态码"""

    instances = []
    returncodes = {}
    missing = set()

    def __init__(self, args, stdin=None, stdout=None, stderr=None, **kwargs):
        self.args = list(args)
        if self.args[0] in FakePopen.missing:
            raise FileNotFoundError(2, "No such file or directory", self.args[0])
        FakePopen.instances.append(self)
        self.returncode = None
        self._code = FakePopen.returncodes.get(self.args[0], 0)
        data = stdin.read() if stdin is not None else ''
        if self.args[0] == 'httpx':
            data = ''.join(f"https://{l} [200]\n" for l in data.splitlines())
        if stdout is subprocess.PIPE:
            self.stdout = io.StringIO(data)
        else:
            stdout.write(data)
            self.stdout = None
        self._stderr_text = 'boom' if self._code else ''
        if stderr is subprocess.PIPE:
            self.stderr = None
        elif stderr is not None:
            stderr.write(self._stderr_text)
            self.stderr = None

    def communicate(self):
        self.returncode = self._code
        return None, self._stderr_text

    def wait(self):
        self.returncode = self._code
        return self._code

    def kill(self):
        pass


class RecordingNotifier(BaseNotifier):
    def __init__(self):
        self.sent = []

    def notify(self, kind, item):
        self.sent.append(f"{kind}: {item}")
        return True


@pytest.fixture
def workdir(tmp_path):
    return tmp_path


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.instances = []
    FakePopen.returncodes = {}
    FakePopen.missing = set()
    monkeypatch.setattr(subprocess, 'Popen', FakePopen)
    return FakePopen


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def http_session():
    """带 post 方法的假 requests.Session"""
    session = MagicMock()
    session.post.return_value = MagicMock(status_code=204)
    return session
