"""
Building blocks shared by every search request.

A search request is a pydantic model whose ``model_fields_set`` doubles as the
record of which optional parameters the caller actually supplied. Composition
copies a field into the wire body only when it is marked, so defaults never
leak into a request.
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from mochow_client.models.schemas import ReadConsistency


class Vector(BaseModel):
    """A query vector. Accepts ``Vector([0.1, 0.2])`` or a plain list wherever a Vector is expected."""

    WIRE_KEY: ClassVar[str] = "vectorFloats"

    model_config = ConfigDict(frozen=True)

    floats: List[float] = Field(..., min_length=1)

    def __init__(self, floats: List[float], **data: Any) -> None:
        super().__init__(floats=floats, **data)

    @model_validator(mode="before")
    @classmethod
    def _from_sequence(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return {"floats": list(value)}
        return value

    def to_wire(self) -> List[float]:
        return list(self.floats)


class DistanceRange(BaseModel):
    """Distance window of a range search; ``min`` maps to distanceNear, ``max`` to distanceFar."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    def __init__(self, min: float, max: float, **data: Any) -> None:
        super().__init__(min=min, max=max, **data)

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return {"min": value[0], "max": value[1]}
        return value


class VectorSearchConfig(BaseModel):
    """
    Engine tuning knobs copied verbatim into ``anns.params``.

    ``ef`` applies to HNSW, ``pruning`` to HNSW/HNSWPQ and
    ``search_coarse_count`` to PUCK. Unknown keyword arguments are kept and
    sent as-is so newer engine parameters need no client change.
    """

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    ef: Optional[int] = Field(None, ge=1)
    pruning: Optional[bool] = None
    search_coarse_count: Optional[int] = Field(None, ge=1)

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# Optional fields common to all search kinds, with their wire keys
COMMON_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("partition_key", "partitionKey"),
    ("projections", "projections"),
    ("read_consistency", "readConsistency"),
    ("filter", "filter"),
    ("limit", "limit"),
)


def _wire_value(value: Any) -> Any:
    """Detach a field value from the request so the body can be mutated freely."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value


class SearchRequestBase(BaseModel):
    """
    Common fields and field tracking for all search requests.

    Optional parameters can be given as constructor keywords or through the
    fluent ``with_*`` setters; both mark the field as explicitly set. A field
    holding ``None`` counts as unset. Unknown keywords are rejected.
    """

    REQUEST_TYPE: ClassVar[str] = "search"
    IS_BATCH: ClassVar[bool] = False

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    partition_key: Optional[Dict[str, Any]] = Field(None, description="Restricts the search to one partition")
    projections: Optional[List[str]] = Field(None, description="Columns to return")
    read_consistency: Optional[ReadConsistency] = None
    filter: Optional[str] = Field(None, description="Scalar filter expression, e.g. \"bookName='Dream'\"")
    limit: Optional[int] = Field(None, ge=1)

    def mark(self, field: str) -> None:
        """Record ``field`` as explicitly set."""
        self.model_fields_set.add(field)

    def is_marked(self, field: str) -> bool:
        return field in self.model_fields_set and getattr(self, field, None) is not None

    def with_partition_key(self, partition_key: Dict[str, Any]) -> "SearchRequestBase":
        self.partition_key = partition_key
        return self

    def with_projections(self, projections: List[str]) -> "SearchRequestBase":
        self.projections = projections
        return self

    def with_read_consistency(self, read_consistency: ReadConsistency) -> "SearchRequestBase":
        self.read_consistency = read_consistency
        return self

    def with_filter(self, filter: str) -> "SearchRequestBase":
        self.filter = filter
        return self

    def with_limit(self, limit: int) -> "SearchRequestBase":
        self.limit = limit
        return self

    def request_type(self) -> str:
        """Query-action tag of the request: ``search`` or ``batchSearch``."""
        return self.REQUEST_TYPE

    def is_batch(self) -> bool:
        """True when the response holds one result set per query vector."""
        return self.IS_BATCH

    def _common_fields_to_dict(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        for name, key in COMMON_FIELDS:
            if self.is_marked(name):
                fields[key] = _wire_value(getattr(self, name))
        return fields

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Compose the request body, without ``database`` and ``table``."""
