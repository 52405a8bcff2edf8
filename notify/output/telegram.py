"""
Telegram Bot API output (sendMessage).

The bot token is part of the URL path, so it is never logged; errors only
report the chat id.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from notify.output.base import Backend

TELEGRAM_API = "https://api.telegram.org"


class TelegramBackend(Backend):
    kind = "telegram"

    def __init__(self, bot_token: str, chat_id: str):
        self._bot_token = bot_token
        self.chat_id = chat_id

    @property
    def destination(self) -> str:
        return str(self.chat_id)

    @property
    def url(self) -> str:
        return f"{TELEGRAM_API}/bot{self._bot_token}/sendMessage"

    async def send_text(self, client: httpx.AsyncClient, text: str) -> None:
        await self._post(client, self.url, {"chat_id": self.chat_id, "text": text})

    async def send_raw(self, client: httpx.AsyncClient, payload: Mapping[str, Any]) -> None:
        # Caller's chat_id wins; the caller's mapping is left untouched.
        body = dict(payload)
        body.setdefault("chat_id", self.chat_id)
        await self._post(client, self.url, body)
