import json
from types import SimpleNamespace

import pytest

from reg_notify_github.logger import Colors


class _RecordingSpinner:
    def __init__(self, text):
        self.text = text
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True


class RecordingLogger:
    def __init__(self):
        self.colors = Colors(enabled=False)
        self.messages = []
        self.spinners = []

    def _record(self, level, msg, args):
        self.messages.append((level, msg % args if args else msg))

    def info(self, msg, *args):
        self._record("info", msg, args)

    def verbose(self, msg, *args):
        self._record("verbose", msg, args)

    def error(self, msg, *args):
        self._record("error", msg, args)

    def get_spinner(self, text):
        spinner = _RecordingSpinner(text)
        self.spinners.append(spinner)
        return spinner

    def by_level(self, level):
        return [msg for lvl, msg in self.messages if lvl == level]


class FakeResponse:
    def __init__(self, status=200, body=""):
        self.status = status
        self.body = body

    async def read(self):
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode()
        return json.dumps(self.body).encode()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stand-in for ``aiohttp.ClientSession`` answering by URL."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def request(self, method, url, json=None, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, json=json, kwargs=kwargs))
        response = self.responses.get(url, FakeResponse())
        if isinstance(response, Exception):
            raise response
        return response


class ForbiddenSession:
    def request(self, *args, **kwargs):
        raise AssertionError("no request expected")


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def forbidden_session():
    return ForbiddenSession()


@pytest.fixture
def commit_env(monkeypatch):
    monkeypatch.setenv("COMMIT_INFO_SHA", "abc123")
    monkeypatch.delenv("COMMIT_INFO_BRANCH", raising=False)
    return monkeypatch
