"""Custom exceptions for the GeoPulse client."""

from __future__ import annotations


class GeoPulseError(Exception):
    """Base exception for all GeoPulse errors."""


class NetworkError(GeoPulseError):
    """Raised when the provider cannot be reached."""


class NetworkTimeoutError(NetworkError):
    """Raised when a request exceeds the 30 second budget."""


class ProviderError(GeoPulseError):
    """Raised when the provider answers with a non-2xx status or an unusable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"HTTP {status_code}: {message}")


class ProviderValidationError(ProviderError):
    """Raised when the response body does not match the expected schema."""
