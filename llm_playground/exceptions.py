"""
Custom exceptions for the playground demos.

Tools that wrap external services turn failures into descriptive strings for
the agent; these exceptions cover the failures that should stop a command.
"""
from typing import Optional


class PlaygroundError(Exception):
    """Base exception for all playground errors."""

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.retryable = retryable

    def to_dict(self) -> dict:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": type(self).__name__,
            "error_message": self.message,
            "retryable": self.retryable,
        }


class ConfigurationError(PlaygroundError):
    """A required environment variable or provider package is missing."""

    def __init__(self, message: str = "Missing configuration"):
        super().__init__(message, retryable=False)


class InvalidAddressError(PlaygroundError):
    """The supplied value is not a 0x-prefixed 40 hex character address."""

    def __init__(self, address: str = ""):
        message = f"Invalid Ethereum address: '{address}'" if address else "Invalid Ethereum address"
        super().__init__(message, retryable=False)
        self.address = address


class ExternalServiceError(PlaygroundError):
    """A hosted API (Neynar, Etherscan, CoinGecko, ...) returned an error."""

    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        full_message = f"{service} API error: {message}"
        if status_code is not None:
            full_message = f"{service} API error ({status_code}): {message}"
        retryable = status_code is None or status_code == 429 or status_code >= 500
        super().__init__(full_message, retryable=retryable)
        self.service = service
        self.status_code = status_code


class UnsafeQueryError(PlaygroundError):
    """A generated SQL statement is not a single read-only SELECT."""

    def __init__(self, query: str = ""):
        super().__init__(f"Refusing to execute non-SELECT SQL: {query}", retryable=False)
        self.query = query


class AnalysisTimeoutError(PlaygroundError, TimeoutError):
    """A streamed agent run did not finish within its time budget."""

    def __init__(self, timeout_seconds: float):
        super().__init__(f"Analysis timed out after {timeout_seconds:g}s", retryable=True)
        self.timeout_seconds = timeout_seconds
