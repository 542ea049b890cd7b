from __future__ import annotations


class AeriesClientError(Exception):
    """Base client error."""


class NetworkError(AeriesClientError):
    """Transport/network layer error."""


class ParseError(AeriesClientError):
    """Response body could not be decoded as JSON."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw


class ValidationError(AeriesClientError):
    """Caller input rejected before any request was made."""


class ApiError(AeriesClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
