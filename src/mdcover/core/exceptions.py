"""
Custom exceptions for mdcover.
"""

from typing import Optional


class MdCoverError(Exception):
    """Base exception for mdcover."""
    pass


class ValidationError(MdCoverError, ValueError):
    """Exception raised when a required request parameter is missing or empty."""
    pass


class ConfigurationError(MdCoverError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(MdCoverError):
    """Base exception for failed calls to the upstream metadata service."""
    pass


class UpstreamUnreachable(APIError, ConnectionError):
    """Exception raised when the upstream service cannot be reached in time."""
    pass


class UpstreamError(APIError):
    """Exception raised when the upstream service answers with a non-200 status."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        status = f"{status_code} {self.reason}".strip()
        super().__init__(f"musicbrainz api error: {status}")


class UpstreamMalformedResponse(APIError):
    """Exception raised when the upstream body is not the expected JSON shape."""
    pass
