"""Error types raised by mock handlers and seed loading."""
from typing import Any, Dict


class MockApiError(Exception):
    """A handler failure that maps onto an HTTP error response."""

    status = 500
    message = "Internal Error"

    def __init__(self, message: str | None = None, status: int | None = None):
        self.message = message or self.message
        self.status = status or self.status
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class UnauthorizedError(MockApiError):
    """Bad credentials on login."""

    status = 401
    message = "Unauthorized"


class SeedError(Exception):
    """Raised when a seed file cannot be loaded or is malformed."""


class ConfigError(Exception):
    """Raised for unknown or unparsable settings."""
