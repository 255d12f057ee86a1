"""Shared fixtures: a recording fake transport and fake responses."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import Mapping
from typing import Any

import httpx
import pytest


class FakeResponse:
    """Response-like object whose parsers depend on instance state."""

    def __init__(self, body: Any = None, headers: Mapping[str, str] | None = None) -> None:
        self.body = body
        self.headers = httpx.Headers(headers or {})
        self.json_calls = 0
        self.text_calls = 0

    async def json(self) -> Any:
        self.json_calls += 1
        return json.loads(self.body) if isinstance(self.body, str) else self.body

    async def text(self) -> str:
        self.text_calls += 1
        return self.body if isinstance(self.body, str) else json.dumps(self.body)


class RecordingTransport:
    """Fake transport recording every call.

    Queued results are returned (or raised, for exceptions) in order; once
    exhausted an empty text response is returned.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.call_times: list[float] = []
        self.results: list[Any] = []
        self.delay = delay

    def queue(self, *results: Any) -> RecordingTransport:
        self.results.extend(results)
        return self

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]

    async def __call__(self, url: str, options: Mapping[str, Any]) -> Any:
        self.calls.append((url, dict(options)))
        self.call_times.append(time.monotonic())
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.results.pop(0) if self.results else FakeResponse("", {"content-type": "text/plain"})
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_response():
    return FakeResponse
