__version__ = "0.1.0"

from .client import AeriesClient, AsyncAeriesClient
from .config_types import DEFAULT_API_VERSION, ClientConfig
from .errors import AeriesClientError, ApiError, AuthError, NetworkError, ParseError, ValidationError
from .result import ApiResult
from .urls import build_api_url, with_query

__all__ = [
    "AeriesClient",
    "AsyncAeriesClient",
    "ClientConfig",
    "DEFAULT_API_VERSION",
    "ApiResult",
    "AeriesClientError",
    "ApiError",
    "AuthError",
    "NetworkError",
    "ParseError",
    "ValidationError",
    "build_api_url",
    "with_query",
]
