"""
Error types raised by the dispatcher and the output backends.

Every per-backend error carries the backend kind and its destination
(chat id, channel id, recipient id or webhook host). Credentials never appear
in error text.
"""

from collections import defaultdict


class NotifyError(Exception):
    """Base class for all notification failures."""

    kind = "notify_error"

    def __init__(self, message: str, *, backend: str | None = None, destination: str | None = None):
        self.message = message
        self.backend = backend
        self.destination = destination
        super().__init__(message)

    def __str__(self) -> str:
        if self.backend:
            return f"[{self.backend}:{self.destination or '-'}] {self.message}"
        return self.message


class InvalidMessageFormat(NotifyError):
    """Message is not text, a sequence of text lines, or a mapping."""

    kind = "invalid_message_format"


class EncodingError(NotifyError):
    """Payload could not be serialized to JSON."""

    kind = "encoding_error"


class RequestConstructionError(NotifyError):
    """Request URL or headers are malformed."""

    kind = "request_construction_error"


class TransportError(NotifyError):
    """The HTTP call itself failed (DNS, connect, timeout, protocol)."""

    kind = "transport_error"


class BackendStatusError(NotifyError):
    """Backend answered with a status other than 200 or 204."""

    kind = "backend_status_error"

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        *,
        host: str | None = None,
        backend: str | None = None,
        destination: str | None = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.host = host
        status = f"{status_code} {reason}".strip()
        super().__init__(
            f"{host or 'backend'} API responded with status: {status}",
            backend=backend,
            destination=destination,
        )


class AggregatedError(NotifyError):
    """One or more backends did not receive the message.

    ``errors`` keeps the per-backend failures in the order the backends were
    registered.
    """

    kind = "aggregated_error"

    def __init__(self, errors):
        self.errors: tuple[NotifyError, ...] = tuple(errors)
        if not self.errors:
            raise ValueError("AggregatedError requires at least one error")
        summary = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} backend(s) failed: {summary}")

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def by_backend(self) -> dict[str, list[NotifyError]]:
        grouped: dict[str, list[NotifyError]] = defaultdict(list)
        for err in self.errors:
            grouped[err.backend or "unknown"].append(err)
        return dict(grouped)
