"""
Abstract interfaces of the client's service layer.
The capability modules depend only on ITransport, never on a concrete HTTP
library, so they can be driven by any transport (or a mock in tests).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from mochow_client.exceptions import (
    MochowClientException,
    ConfigurationError,
    TransportError,
    TransportTimeoutError,
    ServerError
)


# URI prefixes of the service's resources
DATABASE_URI_PREFIX = "/database"
TABLE_URI_PREFIX = "/table"
INDEX_URI_PREFIX = "/index"
ROW_URI_PREFIX = "/row"


class ITransport(ABC):
    """
    Abstract interface for the HTTP round trip.
    Both verbs send ``body`` as JSON and return the decoded JSON response.
    """

    @abstractmethod
    def post(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Send a POST request."""
        pass

    @abstractmethod
    def delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Send a DELETE request."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release pooled connections."""
        pass


class ResourceAPI:
    """Base for capability modules: holds the transport and builds bodies."""

    def __init__(self, transport: ITransport):
        self.transport = transport

    @staticmethod
    def _body(**fields: Any) -> Dict[str, Any]:
        """Build a request body, dropping fields left as None."""
        return {key: value for key, value in fields.items() if value is not None}


__all__ = [
    "ITransport",
    "ResourceAPI",
    "DATABASE_URI_PREFIX",
    "TABLE_URI_PREFIX",
    "INDEX_URI_PREFIX",
    "ROW_URI_PREFIX",
    "MochowClientException",
    "ConfigurationError",
    "TransportError",
    "TransportTimeoutError",
    "ServerError"
]
