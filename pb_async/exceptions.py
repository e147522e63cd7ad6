"""
Custom exceptions for pb-async

Every failure surfaced by the client derives from PushbulletException, so
callers can catch the whole family in one place or pick a specific branch.
"""
from typing import Optional


class PushbulletException(Exception):
    """Base exception for all pb-async errors."""
    pass


class StartupError(PushbulletException):
    """Raised when a client cannot be created."""
    pass


class InvalidTokenError(StartupError):
    """Raised when the access token cannot be sent as an HTTP header value."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid token: {reason} (token: {token!r})")


class ConfigurationException(PushbulletException):
    """Exception for configuration-related errors."""
    pass


class RequestError(PushbulletException):
    """Base exception for failed API requests."""
    pass


class TransportError(RequestError):
    """Raised when the request never produced an HTTP response."""
    pass


class StatusError(RequestError):
    """Raised for a non-2xx response that carries no structured error body."""

    def __init__(self, status: int, body: bytes = b""):
        self.status = status
        self.body = body
        super().__init__(f"server error: {status}: {body!r}")


class ResponseDecodeError(RequestError):
    """Raised when a response body is not the JSON document we expected."""

    def __init__(self, reason: str, body: bytes = b""):
        self.reason = reason
        self.body = body
        super().__init__(f"invalid response json: {reason}. data: {body!r}")


class ServerError(RequestError):
    """Raised when the API reports an error object in its response."""

    def __init__(self, code: str, message: str, status: Optional[int] = None):
        self.code = code
        self.message = message
        self.status = status
        super().__init__(f"server error: {code}: {message}")


class AuthenticationError(ServerError):
    """Raised when the access token is missing, invalid or lacks permission."""
    pass
