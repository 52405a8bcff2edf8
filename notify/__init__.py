from notify.core.errors import (
    AggregatedError,
    BackendStatusError,
    EncodingError,
    InvalidMessageFormat,
    NotifyError,
    RequestConstructionError,
    TransportError,
)
from notify.core.message import Lines, Raw, Text, normalize
from notify.output.base import Backend
from notify.output.discord import DiscordBackend, DiscordWebhookBackend
from notify.output.line import LineBackend
from notify.output.router import Dispatcher
from notify.output.telegram import TelegramBackend

__all__ = [
    "Dispatcher",
    "Backend",
    "TelegramBackend",
    "LineBackend",
    "DiscordBackend",
    "DiscordWebhookBackend",
    "Text",
    "Lines",
    "Raw",
    "normalize",
    "NotifyError",
    "InvalidMessageFormat",
    "EncodingError",
    "RequestConstructionError",
    "TransportError",
    "BackendStatusError",
    "AggregatedError",
]
