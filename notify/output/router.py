"""
Output router: fan a message out to every registered backend.

Backends are invoked in registration order. A failing backend never stops the
others; every failure is logged and collected, then raised together as one
AggregatedError once all backends have been attempted.
"""

import asyncio
from collections.abc import Mapping

import httpx
import structlog

from notify.config import Settings
from notify.core.errors import AggregatedError, NotifyError
from notify.core.message import Message, normalize
from notify.output.base import Backend
from notify.output.discord import DiscordBackend, DiscordWebhookBackend
from notify.output.line import LineBackend
from notify.output.telegram import TelegramBackend

logger = structlog.get_logger()


class Dispatcher:
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 10.0,
        concurrent: bool = False,
    ):
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(timeout=timeout)
        self.concurrent = concurrent
        self._backends: list[Backend] = []

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.AsyncClient | None = None) -> "Dispatcher":
        """Register every backend whose credentials are present in settings."""
        dispatcher = cls(client, timeout=settings.HTTP_TIMEOUT, concurrent=settings.NOTIFY_CONCURRENT)
        if settings.TELEGRAM_BOT_TOKEN and settings.TELEGRAM_CHAT_ID:
            dispatcher.with_telegram(settings.TELEGRAM_BOT_TOKEN, settings.TELEGRAM_CHAT_ID)
        if settings.LINE_CHANNEL_TOKEN and settings.LINE_TO:
            dispatcher.with_line(settings.LINE_CHANNEL_TOKEN, settings.LINE_TO, accumulate=settings.LINE_ACCUMULATE)
        if settings.DISCORD_BOT_TOKEN and settings.DISCORD_CHANNEL_ID:
            dispatcher.with_discord(settings.DISCORD_BOT_TOKEN, settings.DISCORD_CHANNEL_ID)
        for url in settings.webhook_urls:
            dispatcher.with_discord_webhook(url)
        logger.info("notify.configured", backends=[b.kind for b in dispatcher.backends])
        return dispatcher

    # ------------------------------------------------------------------
    # Registration (chainable)
    # ------------------------------------------------------------------

    def register(self, backend: Backend) -> "Dispatcher":
        self._backends.append(backend)
        return self

    def with_telegram(self, bot_token: str, chat_id: str) -> "Dispatcher":
        return self.register(TelegramBackend(bot_token, chat_id))

    def with_line(self, channel_token: str, to: str, accumulate: bool = False) -> "Dispatcher":
        return self.register(LineBackend(channel_token, to, accumulate=accumulate))

    def with_discord(self, bot_token: str, channel_id: str) -> "Dispatcher":
        return self.register(DiscordBackend(bot_token, channel_id))

    def with_discord_webhook(self, webhook_url: str) -> "Dispatcher":
        return self.register(DiscordWebhookBackend(webhook_url))

    @property
    def backends(self) -> tuple[Backend, ...]:
        return tuple(self._backends)

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def send(self, message: Message) -> None:
        """Send message to all backends.

        Raises:
            InvalidMessageFormat: message shape not supported; nothing was sent.
            AggregatedError: one or more backends failed; all were attempted.
        """
        content = normalize(message)
        backends = list(self._backends)

        if self.concurrent:
            results = await asyncio.gather(*(self._attempt(b, content) for b in backends))
        else:
            results = [await self._attempt(b, content) for b in backends]

        errors = [e for e in results if e is not None]
        if errors:
            raise AggregatedError(errors)
        logger.info("notify.sent", backends=len(backends))

    async def _attempt(self, backend: Backend, content: str | Mapping) -> NotifyError | None:
        log = logger.bind(backend=backend.kind, destination=backend.destination)
        try:
            if isinstance(content, str):
                await backend.send_text(self.client, content)
            else:
                await backend.send_raw(self.client, content)
        except NotifyError as e:
            log.warning("notify.backend_failed", error=str(e), kind=e.kind)
            return e
        except Exception as e:
            log.exception("notify.backend_crashed")
            err = NotifyError(f"unexpected error: {e!r}", backend=backend.kind, destination=backend.destination)
            err.__cause__ = e
            return err
        return None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self):
        """Close the HTTP client if this dispatcher created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "Dispatcher":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
