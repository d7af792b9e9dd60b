"""
Hybrid search request: one single-vector search fused with one BM25 search.
"""

from typing import Any, Dict, Union
from pydantic import Field, field_validator

from .base import SearchRequestBase
from .bm25_request import BM25SearchRequest
from .vector_requests import (
    VectorBatchSearchRequest,
    VectorRangeSearchRequest,
    VectorTopkSearchRequest,
)


class HybridSearchRequest(SearchRequestBase):
    """
    Fuse vector similarity and BM25 relevance with two weights.

    ``limit`` and ``filter`` set on the hybrid request apply to both parts.
    When set, they replace whatever limit or filter the parts carry; leave
    them unset on the parts.

    Example:
        HybridSearchRequest(
            VectorTopkSearchRequest("vector", Vector([0.3123, 0.43, 0.213]), 15),
            BM25SearchRequest("book_segment_inverted_idx", "Lu Bu"),
            vector_weight=0.4,
            bm25_weight=0.6,
        ).with_filter("bookName='Romance'").with_limit(15)
    """

    vector_request: Union[VectorTopkSearchRequest, VectorRangeSearchRequest] = Field(..., frozen=True)
    bm25_request: BM25SearchRequest = Field(..., frozen=True)
    vector_weight: float = Field(..., ge=0.0)
    bm25_weight: float = Field(..., ge=0.0)

    def __init__(
        self,
        vector_request: Union[VectorTopkSearchRequest, VectorRangeSearchRequest],
        bm25_request: BM25SearchRequest,
        vector_weight: float,
        bm25_weight: float,
        **data: Any
    ) -> None:
        super().__init__(
            vector_request=vector_request,
            bm25_request=bm25_request,
            vector_weight=vector_weight,
            bm25_weight=bm25_weight,
            **data
        )

    @field_validator("vector_request", mode="before")
    @classmethod
    def _single_vector_only(cls, value: Any) -> Any:
        if isinstance(value, VectorBatchSearchRequest):
            raise ValueError("hybrid search takes a top-k or range vector request, not a batch request")
        return value

    def to_dict(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        fields.update(self.bm25_request.to_dict())
        fields.update(self.vector_request.to_dict())

        common = self._common_fields_to_dict()
        anns = fields.get("anns")
        if anns is not None:
            if "filter" in common:
                anns.pop("filter", None)
            params = anns.get("params")
            if "limit" in common and params is not None:
                params.pop("limit", None)
                if not params:
                    del anns["params"]
        fields.update(common)

        if "anns" in fields:
            fields["anns"]["weight"] = self.vector_weight
        if "BM25SearchParams" in fields:
            fields["BM25SearchParams"]["weight"] = self.bm25_weight
        return fields
