from __future__ import annotations

import dataclasses as dc

import httpx
import pytest

from srvhttp.dns import SRVRecord


@dc.dataclass
class StaticResolver:
    '''
    Returns canned records (or raises) and remembers every name asked for.
    '''
    records: list[SRVRecord] = dc.field(default_factory=list)
    error: BaseException | None = None
    calls: list[tuple[str, float | None]] = dc.field(default_factory=list)

    def resolve(self, hostname: str, lifetime: float | None = None) -> list[SRVRecord]:
        self.calls.append((hostname, lifetime))
        if self.error is not None:
            raise self.error
        return list(self.records)


@dc.dataclass
class AsyncStaticResolver(StaticResolver):
    async def resolve(self, hostname: str, lifetime: float | None = None) -> list[SRVRecord]:  # type: ignore[override]
        return StaticResolver.resolve(self, hostname, lifetime)


class RecordingHandler:
    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.urls: list[str] = []
        self._response = response

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.urls.append(str(request.url))
        if self._response is not None:
            return self._response
        return httpx.Response(200, text='ok')


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def delegate(handler: RecordingHandler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)
