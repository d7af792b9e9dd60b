"""
Main client that ties the capability modules to one transport.
Implements Facade pattern to provide a unified interface to the service.
Follows Dependency Inversion Principle - modules depend on ITransport, not on requests.
"""

from typing import Any, Optional, Union

from mochow_client.config.client_config import ClientConfiguration
from mochow_client.models.responses import SearchRowResponse, BatchSearchRowResponse
from mochow_client.models.search import (
    SearchRequest,
    VectorSearchRequest,
    BM25SearchRequest,
    HybridSearchRequest
)
from mochow_client.utils.logger import LoggerMixin
from .base import ITransport
from .transport import HttpTransport
from .database import DatabaseAPI
from .table import TableAPI
from .index import IndexAPI
from .row import RowAPI


class MochowClient(LoggerMixin):
    """
    Entry point for talking to a Mochow instance.

    Administrative operations live on ``databases``, ``tables``, ``indexes``
    and ``rows``; the search methods are also exposed here directly.
    """

    def __init__(
        self,
        config: Optional[ClientConfiguration] = None,
        transport: Optional[ITransport] = None
    ):
        """
        Initialize the client with dependency injection.

        Args:
            config: Client configuration; read from settings when omitted
            transport: Transport to use; an HttpTransport is built when omitted
        """
        if transport is None:
            self.config = config or ClientConfiguration.from_settings()
            transport = HttpTransport(self.config)
        else:
            self.config = config

        self.transport = transport
        self.databases = DatabaseAPI(transport)
        self.tables = TableAPI(transport)
        self.indexes = IndexAPI(transport)
        self.rows = RowAPI(transport)

        if self.config is not None:
            self.logger.debug(f"Mochow client ready for {self.config.base_url}")

    def search(
        self,
        database: str,
        table: str,
        request: SearchRequest
    ) -> Union[SearchRowResponse, BatchSearchRowResponse]:
        return self.rows.search(database, table, request)

    def vector_search(
        self,
        database: str,
        table: str,
        request: VectorSearchRequest
    ) -> Union[SearchRowResponse, BatchSearchRowResponse]:
        return self.rows.vector_search(database, table, request)

    def bm25_search(self, database: str, table: str, request: BM25SearchRequest) -> SearchRowResponse:
        return self.rows.bm25_search(database, table, request)

    def hybrid_search(self, database: str, table: str, request: HybridSearchRequest) -> SearchRowResponse:
        return self.rows.hybrid_search(database, table, request)

    def close(self) -> None:
        """Release the transport's connections."""
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def create_client(
    endpoint: Optional[str] = None,
    account: Optional[str] = None,
    api_key: Optional[str] = None,
    **overrides: Any
) -> MochowClient:
    """
    Create a client, filling anything not given from settings.

    Args:
        endpoint: Service endpoint, e.g. ``http://127.0.0.1:5287``
        account: Account name
        api_key: API key
        **overrides: Other ClientConfiguration fields (timeout_seconds, ...)

    Returns:
        MochowClient instance

    Raises:
        ConfigurationError: If endpoint or credentials are missing
    """
    config = ClientConfiguration.from_settings(
        endpoint=endpoint,
        account=account,
        api_key=api_key,
        **overrides
    )
    return MochowClient(config)
