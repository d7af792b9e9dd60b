"""Service layer: transport, capability modules and the client facade."""

from .base import (
    ITransport,
    ResourceAPI,
    MochowClientException,
    ConfigurationError,
    TransportError,
    TransportTimeoutError,
    ServerError
)
from .transport import HttpTransport
from .dispatch import SearchCall, dispatch_search
from .database import DatabaseAPI
from .table import TableAPI
from .index import IndexAPI
from .row import RowAPI
from .client import MochowClient, create_client

__all__ = [
    "ITransport",
    "ResourceAPI",
    "HttpTransport",
    "SearchCall",
    "dispatch_search",
    "DatabaseAPI",
    "TableAPI",
    "IndexAPI",
    "RowAPI",
    "MochowClient",
    "create_client",
    "MochowClientException",
    "ConfigurationError",
    "TransportError",
    "TransportTimeoutError",
    "ServerError"
]
