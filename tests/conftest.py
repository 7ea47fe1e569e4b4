"""Shared fixtures: a recording httpx transport in place of the network."""

from __future__ import annotations

import json

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code: int = 200, body=None, content: bytes | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"success": True} if body is None else body
        self.content = content
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_transport():
    def _make(status_code: int = 200, body=None, content: bytes | None = None):
        return RecordingTransport(status_code=status_code, body=body, content=content)

    return _make
