"""
Shared fixtures for Konduto SDK tests.
"""

import json
from typing import Any

import pytest

from konduto.client.transport.base import HttpRequest, HttpResponse
from konduto.config import KondutoSettings
from konduto.core.state import STATE, ConfigState

TEST_ENDPOINT = "https://api.konduto.test/v1"


class FakeTransport:
    """Transport returning queued responses and recording sent requests."""

    def __init__(self, *responses: HttpResponse):
        self.responses = list(responses)
        self.requests: list[HttpRequest] = []
        self.closed = False

    def queue(self, status_code: int = 200, body: Any = None, raw: bytes | None = None):
        payload = raw if raw is not None else json.dumps(body).encode("utf-8")
        self.responses.append(HttpResponse(status_code=status_code, body=payload))

    def queue_error(self, error: Exception):
        self.responses.append(HttpResponse(error=error))

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


class RecordingLogger:
    """Logger sink keeping every call."""

    def __init__(self):
        self.infos: list[tuple[str, dict]] = []
        self.errors: list[tuple[str, dict]] = []

    def info(self, message, context):
        self.infos.append((message, dict(context)))

    def error(self, message, context):
        self.errors.append((message, dict(context)))


@pytest.fixture
def settings():
    return KondutoSettings(api_key=None, endpoint=TEST_ENDPOINT, timeout=5)


@pytest.fixture
def state():
    state = ConfigState()
    state.set_api_key("PabcXYZ")
    return state


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(autouse=True)
def reset_global_state():
    """Keep the process-wide state clean between tests."""
    STATE.reset()
    yield
    STATE.reset()


@pytest.fixture
def recording_logger():
    return RecordingLogger()
