"""Shared typing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# A decoded JSON payload as received from the compositor. Answers are
# normally objects; list methods answer with a bare array.
Document = dict[str, Any]
Response = Any


@dataclass(frozen=True)
class Request:
    """One outgoing IPC call: a slash-delimited method plus optional data."""

    method: str
    data: Document | None = None

    def to_document(self) -> Document:
        return {"method": self.method, "data": self.data}


@dataclass
class ExecuteResult(Generic[T]):
    ok: bool
    data: T | None = None
    error: Exception | None = None


__all__ = ["Document", "ExecuteResult", "Request", "Response"]
