"""Structured error types for the chat client."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Classification of chat client errors."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"


class ChatError(Exception):
    """Base class for errors that abort the chat session."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.TRANSPORT) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type

    def __str__(self) -> str:  # pragma: no cover - convenience
        return self.message


class ConfigurationError(ChatError):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorType.CONFIGURATION)


class TransportError(ChatError):
    """Raised when a request to the Messages endpoint fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorType.TRANSPORT)


class APIStatusError(TransportError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, error_kind: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_kind = error_kind


class ResponseFormatError(TransportError):
    """The response body was not JSON or did not match the expected shape."""


__all__ = [
    "APIStatusError",
    "ChatError",
    "ConfigurationError",
    "ErrorType",
    "ResponseFormatError",
    "TransportError",
]
