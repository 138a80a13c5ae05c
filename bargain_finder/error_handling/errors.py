"""
Error types for the bargain finder.

Two kinds are raised: ConfigError when the provider credential is missing and
UpstreamError when the listings provider fails. Malformed listing fields are
never raised; they degrade to defaults in the raw listing accessors.
"""

from typing import Any, Dict, Optional


class BargainFinderError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def to_response(self) -> Dict[str, Any]:
        """
        Build the JSON error body returned to clients.

        Returns:
            Dictionary with an ``error`` message and optional ``details``
        """
        return {"error": str(self)}


class ConfigError(BargainFinderError):
    """Raised when required configuration (the provider API key) is missing."""

    status_code = 500


class UpstreamError(BargainFinderError):
    """
    Raised when the listings provider responds with a non-success status,
    cannot be reached, or returns a body that is not JSON.

    Attributes:
        status: HTTP status returned by the provider, None for transport failures
        body: Raw response body (or transport error text)
    """

    status_code = 502

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body

    @classmethod
    def from_response(cls, status: int, body: str) -> "UpstreamError":
        """Create an error for a non-success provider response."""
        return cls(f"Repliers API error: {status} - {body}", status=status, body=body)

    def to_response(self) -> Dict[str, Any]:
        response = super().to_response()
        if self.body:
            response["details"] = self.body
        return response
