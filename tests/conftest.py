from __future__ import annotations

from typing import Optional

import pytest
from requests.structures import CaseInsensitiveDict

from wordsapi import Client


class DummyResponse:
    def __init__(self, text: str = "{}", status_code: int = 200, headers: Optional[dict] = None) -> None:
        self.text = text
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})


class DummySession:
    """Records every GET and answers with a canned response (or raises)."""

    def __init__(self, response: Optional[DummyResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response or DummyResponse()
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def session():
    return DummySession()


@pytest.fixture()
def client(session):
    return Client("TEST_TOKEN", session=session)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WORDSAPI_KEY", "WORDSAPI_BASE_URL", "WORDSAPI_HOST", "WORDSAPI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
