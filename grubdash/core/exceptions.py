"""
Resource Errors

Raised by validation steps to short-circuit a request chain.
Exception handlers in main.py render them as the standard error body:
{"status": <int>, "message": "..."} with the HTTP status mirrored.
"""

from typing import Optional


class ResourceError(Exception):
    """Base class for errors that end a request with a client-facing message."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to the error response body."""
        return {"status": self.status_code, "message": self.message}


class ValidationError(ResourceError):
    """Malformed, missing or inconsistent input, or an illegal state change."""

    status_code = 400


class NotFoundError(ResourceError):
    """A path identifier did not resolve to an entity."""

    status_code = 404
