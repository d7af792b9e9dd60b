"""
Response models for every service call.
Every response carries ``code`` and ``msg``; callers branch on ``code``.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field, field_validator

from mochow_client.exceptions import ServerError
from .schemas import WireModel, ServerErrCode, TableDescription, IndexSchema, null_as_empty


Row = Dict[str, Any]


class CommonResponse(WireModel):
    """Fields shared by all responses."""
    code: int = Field(default=0, description="0 on success, see ServerErrCode")
    msg: str = Field(default="", description="Error message when code is non-zero")

    @field_validator("msg", mode="before")
    @classmethod
    def _null_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def ok(self) -> bool:
        return self.code == ServerErrCode.OK

    @property
    def error_code(self) -> Optional[ServerErrCode]:
        """The code as a ServerErrCode, or None when the service sent an unknown one."""
        try:
            return ServerErrCode(self.code)
        except ValueError:
            return None

    def raise_for_code(self) -> "CommonResponse":
        """
        Raise ServerError when the response carries a non-zero code.

        Returns:
            The response itself, so calls can be chained

        Raises:
            ServerError: If ``code`` is non-zero
        """
        if not self.ok:
            raise ServerError(self.code, self.msg)
        return self


class ListDatabaseResponse(CommonResponse):
    databases: List[str] = Field(default_factory=list)

    @field_validator("databases", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class ListTableResponse(CommonResponse):
    tables: List[str] = Field(default_factory=list)

    @field_validator("tables", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class DescTableResponse(CommonResponse):
    table: Optional[TableDescription] = None


class ShowTableStatsResponse(CommonResponse):
    row_count: int = 0
    memory_size_in_byte: int = 0
    disk_size_in_byte: int = 0


class DescIndexResponse(CommonResponse):
    index: Optional[IndexSchema] = None


class InsertRowsResponse(CommonResponse):
    affected_count: int = 0


class UpsertRowsResponse(InsertRowsResponse):
    pass


class QueryRowResponse(CommonResponse):
    row: Optional[Row] = None


class BatchQueryRowResponse(CommonResponse):
    rows: List[Row] = Field(default_factory=list)

    @field_validator("rows", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class SelectRowResponse(CommonResponse):
    is_truncated: bool = False
    next_marker: Optional[Row] = None
    rows: List[Row] = Field(default_factory=list)

    @field_validator("rows", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class RowResult(WireModel):
    """One hit: the row plus its vector distance and/or relevance score."""
    row: Row = Field(default_factory=dict)
    distance: Optional[float] = None
    score: Optional[float] = None

    @field_validator("row", mode="before")
    @classmethod
    def _null_as_empty_row(cls, value: Any) -> Any:
        return {} if value is None else value


class SearchRowResult(WireModel):
    """Hits for one query vector (or one text query)."""
    rows: List[RowResult] = Field(default_factory=list)
    search_vector_floats: Optional[List[float]] = None

    @field_validator("rows", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class SearchRowResponse(CommonResponse, SearchRowResult):
    """Response of a single (non-batch) search."""
    pass


class BatchSearchRowResponse(CommonResponse):
    """Response of a batch search: one result set per query vector."""
    results: List[SearchRowResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


__all__ = [
    "Row",
    "CommonResponse",
    "ListDatabaseResponse",
    "ListTableResponse",
    "DescTableResponse",
    "ShowTableStatsResponse",
    "DescIndexResponse",
    "InsertRowsResponse",
    "UpsertRowsResponse",
    "QueryRowResponse",
    "BatchQueryRowResponse",
    "SelectRowResponse",
    "RowResult",
    "SearchRowResult",
    "SearchRowResponse",
    "BatchSearchRowResponse"
]
