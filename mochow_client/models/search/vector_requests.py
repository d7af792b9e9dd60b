"""
Vector search requests: top-k, distance range and batch.

All three share one composition: the vector payload, the filter and the
tuning parameters live inside ``anns``; only partition key, projections and
read consistency stay at the top level of the body.
"""

from abc import abstractmethod
from typing import Any, ClassVar, Dict, List, Optional
from pydantic import Field

from .base import SearchRequestBase, Vector, DistanceRange, VectorSearchConfig


class VectorSearchRequestBase(SearchRequestBase):
    """Fields and composition shared by the vector search variants."""

    vector_field: str = Field(..., min_length=1, frozen=True, description="Name of the FLOAT_VECTOR column")
    config: Optional[VectorSearchConfig] = Field(None, description="Engine tuning parameters")

    def with_config(self, config: VectorSearchConfig) -> "VectorSearchRequestBase":
        self.config = config
        return self

    @abstractmethod
    def _vector_payload(self) -> Optional[List[Any]]:
        """The value sent under ``vectorFloats``, or None if there is none."""

    def _distance_range(self) -> Optional[DistanceRange]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        anns: Dict[str, Any] = {}
        if self.is_marked("vector_field"):
            anns["vectorField"] = self.vector_field
        payload = self._vector_payload()
        if payload is not None:
            anns[Vector.WIRE_KEY] = payload
        if self.is_marked("filter"):
            anns["filter"] = self.filter

        params: Dict[str, Any] = {}
        if self.is_marked("config"):
            params.update(self.config.to_params())
        distance_range = self._distance_range()
        if distance_range is not None:
            params["distanceNear"] = distance_range.min
            params["distanceFar"] = distance_range.max
        if self.is_marked("limit"):
            params["limit"] = self.limit
        if params:
            anns["params"] = params

        fields: Dict[str, Any] = {}
        if anns:
            fields["anns"] = anns

        for key, value in self._common_fields_to_dict().items():
            # filter and limit are carried inside anns
            if key in ("filter", "limit"):
                continue
            fields[key] = value
        return fields


class VectorTopkSearchRequest(VectorSearchRequestBase):
    """
    Return the ``limit`` rows nearest to one query vector.

    Example:
        VectorTopkSearchRequest("vector", Vector([0.3123, 0.43, 0.213]), 5,
                                filter="bookName='Dream'",
                                config=VectorSearchConfig(ef=200))
    """

    vector: Vector = Field(..., frozen=True)
    limit: int = Field(..., ge=1)

    def __init__(self, vector_field: str, vector: Vector, limit: int, **data: Any) -> None:
        super().__init__(vector_field=vector_field, vector=vector, limit=limit, **data)

    def _vector_payload(self) -> Optional[List[Any]]:
        if self.is_marked("vector"):
            return self.vector.to_wire()
        return None


class VectorRangeSearchRequest(VectorSearchRequestBase):
    """Return rows whose distance to one query vector falls inside a DistanceRange."""

    vector: Vector = Field(..., frozen=True)
    distance_range: DistanceRange = Field(..., frozen=True)

    def __init__(self, vector_field: str, vector: Vector, distance_range: DistanceRange, **data: Any) -> None:
        super().__init__(vector_field=vector_field, vector=vector, distance_range=distance_range, **data)

    def _vector_payload(self) -> Optional[List[Any]]:
        if self.is_marked("vector"):
            return self.vector.to_wire()
        return None

    def _distance_range(self) -> Optional[DistanceRange]:
        return self.distance_range


class VectorBatchSearchRequest(VectorSearchRequestBase):
    """Search several query vectors at once; the response holds one result set per vector."""

    REQUEST_TYPE: ClassVar[str] = "batchSearch"
    IS_BATCH: ClassVar[bool] = True

    vectors: List[Vector] = Field(..., min_length=1, frozen=True)
    distance_range: Optional[DistanceRange] = None

    def __init__(self, vector_field: str, vectors: List[Vector], **data: Any) -> None:
        super().__init__(vector_field=vector_field, vectors=vectors, **data)

    def with_distance_range(self, distance_range: DistanceRange) -> "VectorBatchSearchRequest":
        self.distance_range = distance_range
        return self

    def _vector_payload(self) -> Optional[List[Any]]:
        if self.is_marked("vectors"):
            return [vector.to_wire() for vector in self.vectors]
        return None

    def _distance_range(self) -> Optional[DistanceRange]:
        if self.is_marked("distance_range"):
            return self.distance_range
        return None
