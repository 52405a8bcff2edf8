"""Shared fixtures: an httpx client whose transport records every request."""

import json

import httpx
import pytest
import pytest_asyncio


class Recorder:
    """MockTransport handler that records requests and answers per host."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_by_host: dict[str, int] = {}
        self.raise_for_host: dict[str, Exception] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host in self.raise_for_host:
            raise self.raise_for_host[host]
        return httpx.Response(self.status_by_host.get(host, 200), text="ok")

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)

    @property
    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def recorder():
    return Recorder()


@pytest_asyncio.fixture
async def client(recorder):
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as c:
        yield c
