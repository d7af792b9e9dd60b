"""
Exception hierarchy for the Mochow client.

Service-side failures are reported through the ``code``/``msg`` pair of each
response model and only become exceptions when the caller asks for it with
``raise_for_code()``. Transport failures always raise.
"""

from typing import Optional


class MochowClientException(Exception):
    """Base exception for Mochow client operations."""
    pass


class ConfigurationError(MochowClientException, ValueError):
    """Raised when the client configuration is incomplete or invalid."""
    pass


class TransportError(MochowClientException):
    """Raised when an HTTP round trip fails or returns an unreadable body."""
    pass


class TransportTimeoutError(TransportError):
    """Raised when an HTTP round trip exceeds the configured timeout."""
    pass


class ServerError(MochowClientException):
    """Raised on request for a response carrying a non-zero service code."""

    def __init__(self, code: int, msg: Optional[str] = None):
        self.code = code
        self.msg = msg or ""
        super().__init__(f"[{code}] {self.msg}")
