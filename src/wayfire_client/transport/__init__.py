"""Transport implementations exposed to users."""

from .base import Transport
from .framing import LENGTH_PREFIX_SIZE, MAX_PAYLOAD_SIZE, encode_frame
from .unix import SocketTransport

__all__ = [
    "LENGTH_PREFIX_SIZE",
    "MAX_PAYLOAD_SIZE",
    "SocketTransport",
    "Transport",
    "encode_frame",
]
