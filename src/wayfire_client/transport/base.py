"""Common transport abstractions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..types import Request, Response


@runtime_checkable
class Transport(Protocol):
    """A single sequential IPC session with the compositor.

    Only one operation may be in flight at a time: ``send`` reads frames
    until it finds its own answer, so concurrent callers would consume each
    other's responses.
    """

    @property
    def pending_events(self) -> int: ...

    async def send(self, request: Request) -> Response: ...

    async def read_next_event(self) -> Response: ...

    async def close(self) -> None: ...


__all__ = ["Transport"]
