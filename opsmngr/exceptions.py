"""
Exception classes for the Ops Manager client.
"""

from typing import Optional


class OpsManagerError(Exception):
    """Base exception for all Ops Manager client errors."""
    pass


class InvalidArgumentError(OpsManagerError, ValueError):
    """Raised when a required argument is missing, before any request is sent."""
    pass


class TransportError(OpsManagerError):
    """Raised when the request fails or the server answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
        error_code: Optional[str] = None,
        detail: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        self.error_code = error_code
        self.detail = detail
        self.reason = reason
        super().__init__(self.message)


class OpsManagerTimeoutError(TransportError):
    """Raised when request times out."""
    pass


class DecodeError(OpsManagerError):
    """Raised when a response body does not match the expected JSON shape."""
    pass
