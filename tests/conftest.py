"""
Shared fixtures: a ToolContext wired to an httpx.MockTransport that records every request.
"""

import json

import httpx
import pytest

from tools.trello.context import ToolContext


FULL_SETTINGS = {
    "api_key": "abcdef1234567890",
    "api_token": "secret-token",
    "board_id": "board123",
}


class RequestRecorder:
    """MockTransport handler that remembers requests and answers via `responder`."""

    def __init__(self, responder):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def respond_json(payload, status_code=200):
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def make_context():
    """Build (ctx, recorder). Environment is empty unless given."""
    def _make(responder=None, settings=FULL_SETTINGS, environ=None):
        recorder = RequestRecorder(responder or respond_json({}))
        ctx = ToolContext(
            settings=dict(settings),
            environ=environ or {},
            transport=httpx.MockTransport(recorder),
        )
        return ctx, recorder
    return _make
