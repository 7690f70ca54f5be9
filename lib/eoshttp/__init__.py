from .client import HTTPClient
from .config_types import ClientConfig
from .errors import (
    ConfigError,
    EosHttpError,
    HTTPStatusError,
    SerializationError,
    TransportError,
    is_not_found_error,
)
from .logging_ import setup_logging
from .transport import Transport, shared_transport

__version__ = "0.1.0"

__all__ = [
    "HTTPClient",
    "ClientConfig",
    "Transport",
    "shared_transport",
    "EosHttpError",
    "SerializationError",
    "TransportError",
    "HTTPStatusError",
    "ConfigError",
    "is_not_found_error",
    "setup_logging",
]
