"""Custom exceptions raised by the Wayfire IPC client."""

from __future__ import annotations

from typing import Any


class WayfireError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConfigurationError(WayfireError):
    """Raised when the socket endpoint is not configured."""


class ConnectionError(WayfireError):
    """Raised when the client cannot reach the compositor socket."""


class StreamError(WayfireError):
    """Raised when the socket stream fails mid-operation.

    The transport that raised it is no longer usable.
    """


class EncodeError(WayfireError):
    """Raised when a request cannot be serialized into a frame."""


class CommandError(WayfireError):
    """Raised when the submitted request is invalid."""


class ParseError(WayfireError):
    """Raised when a response cannot be parsed."""


class MissingFieldError(ParseError):
    """Raised when a response lacks a required field."""

    def __init__(self, field: str, *, context: Any | None = None) -> None:
        super().__init__(f"Missing '{field}' field in response", context=context)
        self.field = field


__all__ = [
    "CommandError",
    "ConfigurationError",
    "ConnectionError",
    "EncodeError",
    "MissingFieldError",
    "ParseError",
    "StreamError",
    "WayfireError",
]
