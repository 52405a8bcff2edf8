"""
Message shapes accepted by the dispatcher.

- Text(text)      → sent as-is
- Lines(lines)    → joined with "\\n"
- Raw(payload)    → passed through verbatim to each backend's raw operation

Plain Python values are accepted too: str, list/tuple of str, or a Mapping.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from notify.core.errors import InvalidMessageFormat


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Lines:
    lines: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # A str, bytes or mapping is iterable but is not a sequence of lines.
        if isinstance(self.lines, (str, bytes, Mapping)) or not isinstance(self.lines, Iterable):
            raise InvalidMessageFormat(
                f"invalid message format: lines must be a sequence of str, not {type(self.lines).__name__}"
            )
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True)
class Raw:
    payload: Mapping[str, Any]


Message = Text | Lines | Raw | str | Sequence[str] | Mapping[str, Any]


def _join(lines) -> str:
    if not all(isinstance(line, str) for line in lines):
        raise InvalidMessageFormat("invalid message format: lines must all be str")
    return "\n".join(lines)


def normalize(message: Message) -> str | Mapping[str, Any]:
    """Reduce a message to either the text to send or the raw payload.

    Raises InvalidMessageFormat for anything else, before any backend is touched.
    """
    if isinstance(message, Text) and isinstance(message.text, str):
        return message.text
    if isinstance(message, Lines):
        return _join(message.lines)
    if isinstance(message, Raw) and isinstance(message.payload, Mapping):
        return message.payload
    if isinstance(message, str):
        return message
    if isinstance(message, (list, tuple)):
        return _join(message)
    if isinstance(message, Mapping):
        return message
    raise InvalidMessageFormat(f"invalid message format: {type(message).__name__}")
