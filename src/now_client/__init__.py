"""now_client package exports."""

from .core import (
    InvalidBodyError,
    MissingParameterError,
    MissingTokenError,
    NowAPIError,
    NowClient,
    NowClientError,
    NowHTTPError,
    NowParseError,
    RequestDescription,
    create_client_from_env,
    normalize_error,
    resolve_token,
)
from .core.logging import setup_logging

__all__ = [
    # Client
    "NowClient",
    "RequestDescription",
    "create_client_from_env",
    "resolve_token",
    # Exceptions
    "NowClientError",
    "NowAPIError",
    "NowHTTPError",
    "NowParseError",
    "MissingParameterError",
    "InvalidBodyError",
    "MissingTokenError",
    "normalize_error",
    # Logging
    "setup_logging",
]
