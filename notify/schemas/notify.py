from typing import Any

from pydantic import BaseModel


class NotifyRequest(BaseModel):
    """Text, a list of lines (joined with newlines), or a raw payload object."""
    message: str | list[str] | dict[str, Any]


class NotifyResponse(BaseModel):
    status: str = "sent"
    backends: int


class BackendOut(BaseModel):
    type: str
    destination: str


class FailureOut(BaseModel):
    backend: str | None = None
    destination: str | None = None
    kind: str
    detail: str
    status_code: int | None = None  # set for backend_status_error


class FailureResponse(BaseModel):
    error: str
    failures: list[FailureOut] = []
