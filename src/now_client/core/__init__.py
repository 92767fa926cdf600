"""Core surface for now-client: request execution, errors, configuration."""

from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    NowClient,
    RequestDescription,
)
from .config import create_client_from_env, load_env_config, resolve_token
from .errors import (
    InvalidBodyError,
    MissingParameterError,
    MissingTokenError,
    NowAPIError,
    NowClientError,
    NowHTTPError,
    NowParseError,
    normalize_error,
)

__all__ = [
    # Client
    "NowClient",
    "RequestDescription",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    # Exceptions
    "NowClientError",
    "NowAPIError",
    "NowHTTPError",
    "NowParseError",
    "MissingParameterError",
    "InvalidBodyError",
    "MissingTokenError",
    "normalize_error",
    # Config helpers
    "create_client_from_env",
    "load_env_config",
    "resolve_token",
]
