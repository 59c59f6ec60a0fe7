"""Response parsing helpers shared by the transport and the client."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import MissingFieldError, ParseError
from .types import Response

T = TypeVar("T")

EVENT_KEY = "event"
ERROR_KEY = "error"


def decode_document(payload: bytes) -> Response:
    try:
        return json.loads(payload.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ParseError(f"Response is not valid UTF-8: {exc}", context=payload) from exc
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON response: {exc}", context=payload) from exc


def is_event_document(document: Response) -> bool:
    return isinstance(document, dict) and EVENT_KEY in document


def is_error_document(document: Response) -> bool:
    return isinstance(document, dict) and ERROR_KEY in document


def extract_error_message(document: Response) -> str:
    if not is_error_document(document):
        return "Error occurred"
    error = document[ERROR_KEY]
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return json.dumps(error)


def extract_field(document: Response, field: str) -> Any:
    """Return ``document[field]`` or raise :class:`MissingFieldError`."""
    if not isinstance(document, dict) or field not in document:
        raise MissingFieldError(field, context=document)
    return document[field]


def decode_as(target: Any, value: Any) -> Any:
    """Validate ``value`` into ``target`` (a model class or a typing form)."""
    try:
        return TypeAdapter(target).validate_python(value)
    except ValidationError as exc:
        raise ParseError(f"Failed to parse response: {exc}", context=value) from exc


__all__ = [
    "EVENT_KEY",
    "ERROR_KEY",
    "decode_as",
    "decode_document",
    "extract_error_message",
    "extract_field",
    "is_error_document",
    "is_event_document",
]
