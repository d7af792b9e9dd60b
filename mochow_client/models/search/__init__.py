"""Search request models: vector, BM25 and hybrid."""

from typing import Union

from .base import (
    Vector,
    DistanceRange,
    VectorSearchConfig,
    SearchRequestBase
)
from .vector_requests import (
    VectorSearchRequestBase,
    VectorTopkSearchRequest,
    VectorRangeSearchRequest,
    VectorBatchSearchRequest
)
from .bm25_request import BM25SearchRequest
from .hybrid_request import HybridSearchRequest

VectorSearchRequest = Union[VectorTopkSearchRequest, VectorRangeSearchRequest, VectorBatchSearchRequest]
SearchRequest = Union[VectorSearchRequest, BM25SearchRequest, HybridSearchRequest]

# Closed set of request kinds, for isinstance checks
VECTOR_SEARCH_REQUEST_TYPES = (VectorTopkSearchRequest, VectorRangeSearchRequest, VectorBatchSearchRequest)
SEARCH_REQUEST_TYPES = VECTOR_SEARCH_REQUEST_TYPES + (BM25SearchRequest, HybridSearchRequest)

__all__ = [
    "Vector",
    "DistanceRange",
    "VectorSearchConfig",
    "SearchRequestBase",
    "VectorSearchRequestBase",
    "VectorTopkSearchRequest",
    "VectorRangeSearchRequest",
    "VectorBatchSearchRequest",
    "BM25SearchRequest",
    "HybridSearchRequest",
    "VectorSearchRequest",
    "SearchRequest",
    "VECTOR_SEARCH_REQUEST_TYPES",
    "SEARCH_REQUEST_TYPES"
]
