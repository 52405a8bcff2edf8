"""
LINE Messaging API push output.

Envelope: {"to": <recipient>, "messages": [...]}

By default each call sends exactly one message object. With accumulate=True
the binding keeps its batch across calls and every push carries all messages
sent so far through this binding.
"""

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from notify.output.base import Backend

logger = structlog.get_logger()

LINE_PUSH_URL = "https://api.line.me/v2/bot/message/push"


class LineBackend(Backend):
    kind = "line"

    def __init__(self, channel_token: str, to: str, accumulate: bool = False):
        self._channel_token = channel_token
        self.to = to
        self.accumulate = accumulate
        self.messages: list[Any] = []

    @property
    def destination(self) -> str:
        return str(self.to)

    def _envelope(self, message: Any) -> dict:
        if self.accumulate:
            self.messages.append(message)
            batch = list(self.messages)
        else:
            batch = [message]
        return {"to": self.to, "messages": batch}

    async def _push(self, client: httpx.AsyncClient, message: Any):
        # Snapshot the envelope before awaiting so concurrent sends can't interleave batches.
        envelope = self._envelope(message)
        if self.accumulate:
            logger.debug("output.line.batch", to=self.to, size=len(envelope["messages"]))
        await self._post(
            client,
            LINE_PUSH_URL,
            envelope,
            headers={"Authorization": f"Bearer {self._channel_token}"},
        )

    async def send_text(self, client: httpx.AsyncClient, text: str) -> None:
        await self._push(client, {"type": "text", "text": text})

    async def send_raw(self, client: httpx.AsyncClient, payload: Mapping[str, Any]) -> None:
        await self._push(client, dict(payload))
