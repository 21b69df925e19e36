#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import json

import pytest

from ghmanager.config import GITHUB_API_URL


class DummyResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self._payload = payload
        self.status_code = status_code
        if text is not None:
            self.text = text
        elif payload is None:
            self.text = ""
        else:
            self.text = json.dumps(payload)
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stand-in for `requests.Session` recording every request it receives"""

    def __init__(self):
        self.calls: list[dict] = []
        self.responses: list[DummyResponse] = []

    def queue(self, payload=None, status_code: int = 200, text: str | None = None):
        self.responses.append(DummyResponse(payload, status_code, text))

    def request(self, method, url, headers=None, params=None, json=None, timeout=None, **kwargs):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "path": url.removeprefix(GITHUB_API_URL),
                "headers": headers,
                "params": params,
                "json": json,
                "timeout": timeout,
            }
        )
        if self.responses:
            return self.responses.pop(0)
        return DummyResponse({}, status_code=200)

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_manager(session):
    def _make(manager_cls, **kwargs):
        return manager_cls(token="test-token", session=session, **kwargs)

    return _make
