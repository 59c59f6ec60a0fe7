"""Logging for the IPC transport and the client facade.

Every component logs under ``wayfire.<component>``. The transport gets a
:class:`FrameLogger`, which knows how to describe frames, queued events and
error documents without dumping whole payloads at the default level.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

ROOT_LOGGER_NAME = "wayfire"
PREVIEW_LIMIT = 200

_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def preview(document: Any, limit: int = PREVIEW_LIMIT) -> str:
    """Compact JSON of ``document``, cut to ``limit`` characters."""
    try:
        text = json.dumps(document, separators=(",", ":"), default=repr)
    except ValueError:
        text = repr(document)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class BoundLogger:
    """A ``logging.Logger`` (or adapter) plus this client's level threshold."""

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        self._logger = logger or _root_logger()
        self._level = level
        self._threshold = _LEVELS[level]

    def trace(self, msg: str, *args: Any) -> None:
        self._log(TRACE_LEVEL, msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self._log(logging.DEBUG, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._log(logging.INFO, msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._log(logging.WARNING, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._log(logging.ERROR, msg, *args)

    def child(self, component: str) -> "BoundLogger":
        """Logger for one component, e.g. ``wayfire.client``."""
        return BoundLogger(self._child_logger(component), level=self._level)

    def frames(self) -> "FrameLogger":
        """Logger for the socket transport (``wayfire.transport``)."""
        return FrameLogger(self._child_logger("transport"), level=self._level)

    def _child_logger(self, component: str) -> Any:
        if isinstance(self._logger, logging.Logger):
            return self._logger.getChild(component)
        return self._logger

    def _log(self, level: int, msg: str, *args: Any) -> None:
        if level < self._threshold:
            return
        try:
            self._logger.log(level, msg, *args)
        except Exception:
            # Logging failures must not break an in-flight request
            pass


class FrameLogger(BoundLogger):
    """Describes wire traffic for :class:`~wayfire_client.transport.SocketTransport`."""

    def connecting(self, path: str) -> None:
        self.info("Connecting to %s", path)

    def sent(self, method: str, size: int) -> None:
        self.debug("IPC -> %s bytes=%d", method, size)

    def received(self, size: int, document: Any) -> None:
        self.debug("IPC <- bytes=%d", size)
        if self._threshold <= TRACE_LEVEL:
            self.trace("IPC <- %s", preview(document))

    def queued(self, event: Any, waiting_for: str, depth: int) -> None:
        self.trace("Queued event %s while waiting for %s (pending=%d)", event.get("event"), waiting_for, depth)

    def remote_error(self, message: str) -> None:
        self.warn("Compositor returned an error: %s", message)

    def broken(self, reason: str) -> None:
        self.error("IPC connection unusable: %s", reason)


def _root_logger() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "FrameLogger", "LogLevel", "TRACE_LEVEL", "create_logger", "preview"]
