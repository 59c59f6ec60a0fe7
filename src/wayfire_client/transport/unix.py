"""Unix socket transport using asyncio streams.

The Wayfire IPC protocol carries no request IDs. The first non-event frame
that arrives after a request is written is that request's answer; any event
frames seen before it are queued for :meth:`SocketTransport.read_next_event`.
"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any

from ..config import resolve_socket_path
from ..errors import CommandError, ConnectionError, StreamError
from ..logger import BoundLogger, FrameLogger, create_logger
from ..parser import decode_document, extract_error_message, is_error_document, is_event_document
from ..types import Request, Response
from .framing import LENGTH_PREFIX_SIZE, decode_length, encode_frame


class SocketTransport:
    """Owns one compositor connection and its pending-event queue.

    Usage:
        transport = await SocketTransport.connect()
        view = await transport.send(Request("window-rules/get-focused-view"))
        event = await transport.read_next_event()
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: Any,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._logger: FrameLogger = (logger or create_logger()).frames()
        self._pending_events: deque[Response] = deque()
        self._broken: str | None = None

    @classmethod
    async def connect(
        cls,
        path: str | None = None,
        *,
        logger: BoundLogger | None = None,
    ) -> "SocketTransport":
        socket_path = resolve_socket_path(path)
        bound = logger or create_logger()
        bound.frames().connecting(socket_path)
        try:
            reader, writer = await asyncio.open_unix_connection(socket_path)
        except OSError as exc:
            raise ConnectionError(f"Cannot connect to {socket_path}: {exc}", context=socket_path) from exc
        return cls(reader, writer, logger=bound)

    @property
    def pending_events(self) -> int:
        return len(self._pending_events)

    @property
    def usable(self) -> bool:
        return self._broken is None

    async def send(self, request: Request) -> Response:
        """Write ``request`` and return its answer, queueing interleaved events."""
        await self.send_request(request)
        while True:
            message = await self.read_message()
            if is_event_document(message):
                self._pending_events.append(message)
                self._logger.queued(message, request.method, len(self._pending_events))
                continue
            return message

    async def send_request(self, request: Request) -> None:
        if not isinstance(request.method, str) or not request.method:
            raise CommandError("Request method must be a non-empty string", context=request)
        self._ensure_usable()
        frame = encode_frame(request)
        self._logger.sent(request.method, len(frame) - LENGTH_PREFIX_SIZE)
        try:
            self._writer.write(frame)
            await self._writer.drain()
        except OSError as exc:
            self._mark_broken(f"write failed: {exc}")
            raise StreamError(f"IPC write failed: {exc}") from exc
        except asyncio.CancelledError:
            self._mark_broken("write cancelled")
            raise

    async def read_message(self) -> Response:
        """Read exactly one frame and decode it.

        A payload that is not valid JSON fails this call only; the declared
        length has been consumed so the stream stays aligned.
        """
        self._ensure_usable()
        header = await self._read_exactly(LENGTH_PREFIX_SIZE)
        length = decode_length(header)
        payload = await self._read_exactly(length)

        message = decode_document(payload)
        self._logger.received(length, message)
        if is_error_document(message):
            self._logger.remote_error(extract_error_message(message))
        return message

    async def read_next_event(self) -> Response:
        """Return the oldest queued event, else the next frame off the stream.

        Frames read from the stream are returned whatever their shape.
        """
        if self._pending_events:
            return self._pending_events.popleft()
        return await self.read_message()

    async def close(self) -> None:
        if self._broken == "closed":
            return
        self._broken = "closed"
        self._writer.close()
        try:
            await self._writer.wait_closed()
        except OSError as exc:
            self._logger.debug("Ignoring error while closing socket: %s", exc)
        self._logger.info("Connection closed")

    async def _read_exactly(self, n: int) -> bytes:
        try:
            return await self._reader.readexactly(n)
        except asyncio.IncompleteReadError as exc:
            self._mark_broken("connection closed by compositor")
            raise StreamError(
                f"IPC stream closed after {len(exc.partial)} of {n} bytes",
                context=exc.partial,
            ) from exc
        except OSError as exc:
            self._mark_broken(f"read failed: {exc}")
            raise StreamError(f"IPC read failed: {exc}") from exc
        except asyncio.CancelledError:
            self._mark_broken("read cancelled mid-frame")
            raise

    def _ensure_usable(self) -> None:
        if self._broken is not None:
            raise StreamError(f"Transport is no longer usable ({self._broken})")

    def _mark_broken(self, reason: str) -> None:
        if self._broken is None:
            self._logger.broken(reason)
            self._broken = reason


__all__ = ["SocketTransport"]
