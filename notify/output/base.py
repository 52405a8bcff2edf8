"""
Backend contract and the shared HTTP helper.

Each backend shapes its own request body and delegates the POST plus status
interpretation to post_json():
- 200 / 204 → success
- any other status → BackendStatusError
- transport failure → TransportError
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from notify.core.errors import BackendStatusError, EncodingError, RequestConstructionError, TransportError

logger = structlog.get_logger()

SUCCESS_STATUSES = (200, 204)


class Backend(ABC):
    """A configured destination that can receive text or a raw payload."""

    kind: str = "backend"

    @property
    @abstractmethod
    def destination(self) -> str:
        """Identifier safe to log: chat/channel/recipient id or webhook host."""

    @abstractmethod
    async def send_text(self, client: httpx.AsyncClient, text: str) -> None: ...

    @abstractmethod
    async def send_raw(self, client: httpx.AsyncClient, payload: Mapping[str, Any]) -> None: ...

    def describe(self) -> dict:
        return {"type": self.kind, "destination": self.destination}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.destination}>"

    async def _post(self, client: httpx.AsyncClient, url: str, payload: Any, headers: dict | None = None):
        await post_json(
            client, url, payload, headers=headers, backend=self.kind, destination=self.destination
        )


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    payload: Any,
    *,
    headers: dict | None = None,
    backend: str | None = None,
    destination: str | None = None,
) -> httpx.Response:
    """POST payload as JSON and classify the response.

    The response body is read in full by client.send(), which also releases the
    connection back to the pool on every path.
    """
    ctx = {"backend": backend, "destination": destination}

    try:
        body = json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"failed to marshal json: {e}", **ctx) from e

    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    try:
        request = client.build_request("POST", url, content=body, headers=request_headers)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        # URL and header values may carry credentials; never echo them.
        raise RequestConstructionError(f"failed to create request: {type(e).__name__}", **ctx) from e
    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise RequestConstructionError(f"failed to create request: unsupported url scheme {request.url.scheme!r}", **ctx)

    try:
        response = await client.send(request)
    except httpx.RequestError as e:
        raise TransportError(f"failed to send request: {e!r}", **ctx) from e

    if response.status_code not in SUCCESS_STATUSES:
        raise BackendStatusError(
            response.status_code,
            response.reason_phrase,
            host=request.url.host,
            **ctx,
        )

    logger.debug("output.sent", status=response.status_code, **ctx)
    return response
