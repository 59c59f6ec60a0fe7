"""Length-prefixed JSON framing for the Wayfire IPC socket.

Each frame is a 4-byte little-endian unsigned length followed by exactly
that many bytes of UTF-8 JSON. The same format is used in both directions.
"""

from __future__ import annotations

import json
import struct

from ..errors import EncodeError
from ..types import Request

LENGTH_PREFIX = struct.Struct("<I")
LENGTH_PREFIX_SIZE = LENGTH_PREFIX.size
MAX_PAYLOAD_SIZE = 2**32 - 1


def encode_payload(request: Request) -> bytes:
    try:
        return json.dumps(request.to_document(), separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot serialize request {request.method!r}: {exc}", context=request) from exc


def frame_payload(payload: bytes) -> bytes:
    if len(payload) > MAX_PAYLOAD_SIZE:
        raise EncodeError(f"Payload of {len(payload)} bytes does not fit a frame header")
    return LENGTH_PREFIX.pack(len(payload)) + payload


def encode_frame(request: Request) -> bytes:
    return frame_payload(encode_payload(request))


def decode_length(header: bytes) -> int:
    return LENGTH_PREFIX.unpack(header)[0]


__all__ = [
    "LENGTH_PREFIX_SIZE",
    "MAX_PAYLOAD_SIZE",
    "decode_length",
    "encode_frame",
    "encode_payload",
    "frame_payload",
]
