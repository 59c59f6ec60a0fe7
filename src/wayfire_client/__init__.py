"""Public surface for the Wayfire IPC client."""

from .client import WayfireClient
from .config import SOCKET_ENV_VAR, resolve_socket_path
from .errors import (
    CommandError,
    ConfigurationError,
    ConnectionError,
    EncodeError,
    MissingFieldError,
    ParseError,
    StreamError,
    WayfireError,
)
from .models import (
    Geometry,
    InputDevice,
    Layout,
    OptionValueResponse,
    Output,
    View,
    ViewAlpha,
    WayfireConfiguration,
    WorkspaceSet,
)
from .transport import SocketTransport, Transport
from .types import Document, ExecuteResult, Request
from .version import __version__

__all__ = [
    "__version__",
    "CommandError",
    "ConfigurationError",
    "ConnectionError",
    "Document",
    "EncodeError",
    "ExecuteResult",
    "Geometry",
    "InputDevice",
    "Layout",
    "MissingFieldError",
    "OptionValueResponse",
    "Output",
    "ParseError",
    "Request",
    "SOCKET_ENV_VAR",
    "SocketTransport",
    "StreamError",
    "Transport",
    "View",
    "ViewAlpha",
    "WayfireClient",
    "WayfireConfiguration",
    "WayfireError",
    "WorkspaceSet",
    "resolve_socket_path",
]
