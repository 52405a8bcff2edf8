"""
Discord outputs.

- DiscordBackend: bot API, POST /channels/{id}/messages with "Bot" auth
- DiscordWebhookBackend: plain incoming webhook URL, no auth header

Both send text as {"content": text} and raw payloads unchanged.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import httpx

from notify.output.base import Backend

DISCORD_API = "https://discord.com/api/v10"


class DiscordBackend(Backend):
    kind = "discord"

    def __init__(self, bot_token: str, channel_id: str):
        self._bot_token = bot_token
        self.channel_id = channel_id

    @property
    def destination(self) -> str:
        return str(self.channel_id)

    @property
    def url(self) -> str:
        return f"{DISCORD_API}/channels/{self.channel_id}/messages"

    def _headers(self) -> dict:
        return {"Authorization": f"Bot {self._bot_token}"}

    async def send_text(self, client: httpx.AsyncClient, text: str) -> None:
        await self._post(client, self.url, {"content": text}, headers=self._headers())

    async def send_raw(self, client: httpx.AsyncClient, payload: Mapping[str, Any]) -> None:
        await self._post(client, self.url, dict(payload), headers=self._headers())


class DiscordWebhookBackend(Backend):
    kind = "discord_webhook"

    def __init__(self, webhook_url: str):
        self.webhook_url = webhook_url

    @property
    def destination(self) -> str:
        # Webhook paths embed a secret; only the host is safe to report.
        return urlsplit(self.webhook_url).hostname or "invalid-url"

    async def send_text(self, client: httpx.AsyncClient, text: str) -> None:
        await self._post(client, self.webhook_url, {"content": text})

    async def send_raw(self, client: httpx.AsyncClient, payload: Mapping[str, Any]) -> None:
        await self._post(client, self.webhook_url, dict(payload))
