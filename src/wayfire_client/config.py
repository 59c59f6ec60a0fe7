"""Client configuration and socket endpoint resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from .errors import ConfigurationError
from .logger import LogLevel

if TYPE_CHECKING:
    from .transport.base import Transport

SOCKET_ENV_VAR = "WAYFIRE_SOCKET"


def resolve_socket_path(path: str | None = None, env: Mapping[str, str] | None = None) -> str:
    """Return the compositor socket path.

    An explicit ``path`` wins; otherwise ``WAYFIRE_SOCKET`` must be set.
    """
    if path:
        return path
    environ = os.environ if env is None else env
    resolved = environ.get(SOCKET_ENV_VAR)
    if not resolved:
        raise ConfigurationError(f"{SOCKET_ENV_VAR} environment variable not set")
    return resolved


@dataclass
class ClientOptions:
    socket_path: str | None = None
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


__all__ = ["ClientOptions", "SOCKET_ENV_VAR", "resolve_socket_path"]
