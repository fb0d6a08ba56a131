"""Exceptions raised by the chat layer."""

from __future__ import annotations


class BackendError(Exception):
    """Base class for anything that went wrong talking to the chat backend."""


class BackendHTTPError(BackendError):
    """The backend answered with a non-2xx status (or no status at all: -1)."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Backend HTTP {code}")
        self.code = code


class BackendTransportError(BackendError):
    """Connection, timeout or serialization failure before a status arrived."""


class ChatBusyError(RuntimeError):
    """A chat request is still in flight."""
