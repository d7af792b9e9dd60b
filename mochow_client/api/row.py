"""
Row operations: writes, point reads, scans and search.

Search requests go through ``dispatch_search``, which decides between
``?search`` and ``?batchSearch`` and the matching response model. The typed
entry points reject a request of the wrong kind before anything is sent.
"""

from typing import Any, Dict, List, Optional, Union

from mochow_client.models.schemas import QueryKey, ReadConsistency
from mochow_client.models.responses import (
    Row,
    CommonResponse,
    InsertRowsResponse,
    UpsertRowsResponse,
    QueryRowResponse,
    BatchQueryRowResponse,
    SelectRowResponse,
    SearchRowResponse,
    BatchSearchRowResponse
)
from mochow_client.models.search import (
    SearchRequest,
    VectorSearchRequest,
    BM25SearchRequest,
    HybridSearchRequest,
    VECTOR_SEARCH_REQUEST_TYPES
)
from mochow_client.utils.logger import LoggerMixin
from .base import ResourceAPI, ROW_URI_PREFIX
from .dispatch import dispatch_search


def _consistency(read_consistency: Union[ReadConsistency, str]) -> str:
    return ReadConsistency(read_consistency).value


class RowAPI(ResourceAPI, LoggerMixin):
    """Operations on ``/row``."""

    def insert_rows(self, database: str, table: str, rows: List[Row]) -> InsertRowsResponse:
        """Insert rows; fails on duplicate primary keys."""
        self.logger.debug(f"Inserting {len(rows)} rows into '{database}.{table}'")
        body = {"database": database, "table": table, "rows": rows}
        raw = self.transport.post(ROW_URI_PREFIX, {"insert": ""}, body)
        return InsertRowsResponse.model_validate(raw)

    def upsert_rows(self, database: str, table: str, rows: List[Row]) -> UpsertRowsResponse:
        """Insert rows, replacing any row with the same primary key."""
        self.logger.debug(f"Upserting {len(rows)} rows into '{database}.{table}'")
        body = {"database": database, "table": table, "rows": rows}
        raw = self.transport.post(ROW_URI_PREFIX, {"upsert": ""}, body)
        return UpsertRowsResponse.model_validate(raw)

    def delete_rows(
        self,
        database: str,
        table: str,
        primary_key: Optional[Dict[str, Any]] = None,
        partition_key: Optional[Dict[str, Any]] = None,
        filter: Optional[str] = None
    ) -> CommonResponse:
        """
        Delete one row by primary key, or every row matching ``filter``.

        Raises:
            ValueError: If neither primary key nor filter is given
        """
        if primary_key is None and filter is None:
            raise ValueError("delete_rows needs a primary key or a filter")
        body = self._body(
            database=database,
            table=table,
            primaryKey=primary_key,
            partitionKey=partition_key,
            filter=filter,
        )
        raw = self.transport.post(ROW_URI_PREFIX, {"delete": ""}, body)
        return CommonResponse.model_validate(raw)

    def query_row(
        self,
        database: str,
        table: str,
        primary_key: Dict[str, Any],
        partition_key: Optional[Dict[str, Any]] = None,
        projections: Optional[List[str]] = None,
        retrieve_vector: bool = False,
        read_consistency: Union[ReadConsistency, str] = ReadConsistency.EVENTUAL
    ) -> QueryRowResponse:
        body = self._body(
            database=database,
            table=table,
            primaryKey=primary_key,
            partitionKey=partition_key,
            projections=projections,
            retrieveVector=retrieve_vector,
            readConsistency=_consistency(read_consistency),
        )
        raw = self.transport.post(ROW_URI_PREFIX, {"query": ""}, body)
        return QueryRowResponse.model_validate(raw)

    def batch_query_rows(
        self,
        database: str,
        table: str,
        keys: List[QueryKey],
        projections: Optional[List[str]] = None,
        retrieve_vector: bool = False,
        read_consistency: Union[ReadConsistency, str] = ReadConsistency.EVENTUAL
    ) -> BatchQueryRowResponse:
        """Fetch several rows by key in one round trip."""
        body = self._body(
            database=database,
            table=table,
            keys=[key.to_wire() for key in keys],
            projections=projections,
            retrieveVector=retrieve_vector,
            readConsistency=_consistency(read_consistency),
        )
        raw = self.transport.post(ROW_URI_PREFIX, {"batchQuery": ""}, body)
        return BatchQueryRowResponse.model_validate(raw)

    def update_row(
        self,
        database: str,
        table: str,
        primary_key: Dict[str, Any],
        update: Dict[str, Any],
        partition_key: Optional[Dict[str, Any]] = None
    ) -> CommonResponse:
        """Overwrite the given non-key columns of one row."""
        body = self._body(
            database=database,
            table=table,
            primaryKey=primary_key,
            partitionKey=partition_key,
            update=update,
        )
        raw = self.transport.post(ROW_URI_PREFIX, {"update": ""}, body)
        return CommonResponse.model_validate(raw)

    def select_rows(
        self,
        database: str,
        table: str,
        filter: Optional[str] = None,
        marker: Optional[Dict[str, Any]] = None,
        projections: Optional[List[str]] = None,
        limit: int = 10,
        read_consistency: Union[ReadConsistency, str] = ReadConsistency.EVENTUAL
    ) -> SelectRowResponse:
        """
        Scan rows matching ``filter``, one page at a time.

        Pass the previous response's ``next_marker`` as ``marker`` while
        ``is_truncated`` is True to read the next page.
        """
        body = self._body(
            database=database,
            table=table,
            filter=filter,
            marker=marker,
            projections=projections,
            limit=limit,
            readConsistency=_consistency(read_consistency),
        )
        raw = self.transport.post(ROW_URI_PREFIX, {"select": ""}, body)
        return SelectRowResponse.model_validate(raw)

    def search(
        self,
        database: str,
        table: str,
        request: SearchRequest
    ) -> Union[SearchRowResponse, BatchSearchRowResponse]:
        """
        Run any search request.

        Returns:
            SearchRowResponse, or BatchSearchRowResponse for a batch vector request

        Raises:
            TypeError: If ``request`` is not a search request
        """
        call = dispatch_search(database, table, request)
        self.logger.debug(
            f"Dispatching {type(request).__name__} on '{database}.{table}' "
            f"as ?{call.action} (batch={request.is_batch()})"
        )
        raw = self.transport.post(ROW_URI_PREFIX, call.params, call.body)
        return call.response_model.model_validate(raw)

    def vector_search(
        self,
        database: str,
        table: str,
        request: VectorSearchRequest
    ) -> Union[SearchRowResponse, BatchSearchRowResponse]:
        if not isinstance(request, VECTOR_SEARCH_REQUEST_TYPES):
            raise TypeError(f"vector_search expects a vector search request, got {type(request).__name__}")
        return self.search(database, table, request)

    def bm25_search(self, database: str, table: str, request: BM25SearchRequest) -> SearchRowResponse:
        if not isinstance(request, BM25SearchRequest):
            raise TypeError(f"bm25_search expects a BM25SearchRequest, got {type(request).__name__}")
        return self.search(database, table, request)

    def hybrid_search(self, database: str, table: str, request: HybridSearchRequest) -> SearchRowResponse:
        if not isinstance(request, HybridSearchRequest):
            raise TypeError(f"hybrid_search expects a HybridSearchRequest, got {type(request).__name__}")
        return self.search(database, table, request)
