"""
Data models and schemas for the Mochow client.
This module defines the enums and the table/index schema models shared by
requests and responses. Attributes are snake_case; the wire uses camelCase.
"""

from enum import Enum, IntEnum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model whose JSON form uses the service's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump to the wire representation, dropping unset optional values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class MetricType(str, Enum):
    """Distance metrics of a vector index."""
    L2 = "L2"
    IP = "IP"
    COSINE = "COSINE"


class IndexType(str, Enum):
    """Index types; the last three are scalar indexes."""
    HNSW = "HNSW"
    FLAT = "FLAT"
    PUCK = "PUCK"
    HNSWPQ = "HNSWPQ"
    SECONDARY_INDEX = "SECONDARY"
    INVERTED_INDEX = "INVERTED"
    FILTERING_INDEX = "FILTERING_INDEX"


class InvertedIndexAnalyzer(str, Enum):
    """Analyzers available to an inverted (BM25) index."""
    ENGLISH_ANALYZER = "ENGLISH_ANALYZER"
    CHINESE_ANALYZER = "CHINESE_ANALYZER"
    DEFAULT_ANALYZER = "DEFAULT_ANALYZER"


class InvertedIndexParseMode(str, Enum):
    """Tokenization granularity of an inverted index."""
    COARSE_MODE = "COARSE_MODE"
    FINE_MODE = "FINE_MODE"


class InvertedIndexFieldAttribute(str, Enum):
    """Whether an inverted index field is analyzed."""
    NOT_ANALYZED = "ATTRIBUTE_NOT_ANALYZED"
    ANALYZED = "ATTRIBUTE_ANALYZED"


class IndexStructureType(str, Enum):
    """Structure of a filtering index field."""
    DEFAULT = "DEFAULT"
    BITMAP = "BITMAP"


class FieldType(str, Enum):
    """Column types of a table."""
    BOOL = "BOOL"
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    STRING = "STRING"
    BINARY = "BINARY"
    UUID = "UUID"
    TEXT = "TEXT"
    TEXT_GBK = "TEXT_GBK"
    TEXT_GB18030 = "TEXT_GB18030"
    ARRAY = "ARRAY"
    FLOAT_VECTOR = "FLOAT_VECTOR"


class ElementType(str, Enum):
    """Element types allowed inside an ARRAY field."""
    BOOL = "BOOL"
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    STRING = "STRING"


class AutoBuildPolicyType(str, Enum):
    """Triggers for automatic vector index builds."""
    TIMING = "TIMING"
    PERIODICAL = "PERIODICAL"
    ROW_COUNT_INCREMENT = "ROW_COUNT_INCREMENT"


class PartitionType(str, Enum):
    """Partitioning schemes of a table."""
    HASH = "HASH"


class ReadConsistency(str, Enum):
    """Read consistency levels for query and search."""
    EVENTUAL = "EVENTUAL"
    STRONG = "STRONG"


class TableState(str, Enum):
    """Lifecycle states of a table."""
    CREATING = "CREATING"
    NORMAL = "NORMAL"
    DELETING = "DELETING"


class IndexState(str, Enum):
    """Lifecycle states of an index."""
    BUILDING = "BUILDING"
    NORMAL = "NORMAL"


class ServerErrCode(IntEnum):
    """Codes returned in the ``code`` field of every response."""
    OK = 0
    INTERNAL_ERROR = 1
    INVALID_PARAMETER = 2
    INVALID_HTTP_URL = 10
    INVALID_HTTP_HEADER = 11
    INVALID_HTTP_BODY = 12
    MISS_SSL_CERTIFICATES = 13
    USER_NOT_EXIST = 20
    USER_ALREADY_EXIST = 21
    ROLE_NOT_EXIST = 22
    ROLE_ALREADY_EXIST = 23
    AUTHENTICATION_FAILED = 24
    PERMISSION_DENIED = 25
    DB_NOT_EXIST = 50
    DB_ALREADY_EXIST = 51
    DB_TOO_MANY_TABLES = 52
    DB_NOT_EMPTY = 53
    INVALID_TABLE_SCHEMA = 60
    INVALID_PARTITION_PARAMETERS = 61
    TABLE_TOO_MANY_FIELDS = 62
    TABLE_TOO_MANY_FAMILIES = 63
    TABLE_TOO_MANY_PRIMARY_KEYS = 64
    TABLE_TOO_MANY_PARTITION_KEYS = 65
    TABLE_TOO_MANY_VECTOR_FIELDS = 66
    TABLE_TOO_MANY_INDEXES = 67
    DYNAMIC_SCHEMA_ERROR = 68
    TABLE_NOT_EXIST = 69
    TABLE_ALREADY_EXIST = 70
    INVALID_TABLE_STATE = 71
    TABLE_NOT_READY = 72
    ALIAS_NOT_EXIST = 73
    ALIAS_ALREADY_EXIST = 74
    FIELD_NOT_EXIST = 80
    FIELD_ALREADY_EXIST = 81
    VECTOR_FIELD_NOT_EXIST = 82
    INVALID_INDEX_SCHEMA = 90
    INDEX_NOT_EXIST = 91
    INDEX_ALREADY_EXIST = 92
    INDEX_DUPLICATED = 93
    INVALID_INDEX_STATE = 94
    PRIMARY_KEY_DUPLICATED = 100


# Decoded enum values: known ones become the enum, values added by newer
# servers stay plain strings
PartitionTypeValue = Annotated[Union[PartitionType, str], Field(union_mode="left_to_right")]
FieldTypeValue = Annotated[Union[FieldType, str], Field(union_mode="left_to_right")]
ElementTypeValue = Annotated[Union[ElementType, str], Field(union_mode="left_to_right")]
IndexTypeValue = Annotated[Union[IndexType, str], Field(union_mode="left_to_right")]
MetricTypeValue = Annotated[Union[MetricType, str], Field(union_mode="left_to_right")]
IndexStructureTypeValue = Annotated[Union[IndexStructureType, str], Field(union_mode="left_to_right")]
FieldAttributeValue = Annotated[Union[InvertedIndexFieldAttribute, str], Field(union_mode="left_to_right")]
IndexStateValue = Annotated[Union[IndexState, str], Field(union_mode="left_to_right")]
TableStateValue = Annotated[Union[TableState, str], Field(union_mode="left_to_right")]


def null_as_empty(value: Any) -> Any:
    """Decode a JSON null list as an empty list."""
    return [] if value is None else value


# Table schema models
class PartitionParams(WireModel):
    """How a table is partitioned."""
    partition_type: PartitionTypeValue = PartitionType.HASH
    partition_num: int = Field(..., ge=1)


class FieldSchema(WireModel):
    """One column of a table."""
    field_name: str = Field(..., min_length=1)
    field_type: FieldTypeValue
    primary_key: Optional[bool] = None
    partition_key: Optional[bool] = None
    auto_increment: Optional[bool] = None
    not_null: Optional[bool] = None
    dimension: Optional[int] = Field(None, ge=1, description="Required for FLOAT_VECTOR fields")
    element_type: Optional[ElementTypeValue] = Field(None, description="Required for ARRAY fields")
    max_capacity: Optional[int] = Field(None, ge=1, description="Required for ARRAY fields")


# Index schema models
class AutoBuildTiming(WireModel):
    """Build once at a wall-clock time, e.g. ``2024-06-06 00:00:00``."""
    policy_type: Literal["TIMING"] = "TIMING"
    timing: str


class AutoBuildPeriodical(WireModel):
    """Build every ``periodical_in_second`` seconds, optionally from a start time."""
    policy_type: Literal["PERIODICAL"] = "PERIODICAL"
    periodical_in_second: int = Field(..., ge=1)
    timing: Optional[str] = None


class AutoBuildIncrement(WireModel):
    """Build after an absolute or relative number of new rows."""
    policy_type: Literal["ROW_COUNT_INCREMENT"] = "ROW_COUNT_INCREMENT"
    row_count_increment: Optional[int] = Field(None, ge=1)
    row_count_increment_ratio: Optional[float] = Field(None, gt=0)


AutoBuildPolicy = Union[AutoBuildTiming, AutoBuildPeriodical, AutoBuildIncrement]


class FilteringIndexField(WireModel):
    """A field of a filtering index together with its structure."""
    field: str
    index_structure_type: IndexStructureTypeValue = IndexStructureType.DEFAULT


class IndexSchema(WireModel):
    """Definition (and, when described, state) of one index."""
    index_name: str = Field(..., min_length=1)
    index_type: IndexTypeValue
    metric_type: Optional[MetricTypeValue] = None
    params: Optional[Dict[str, Any]] = Field(None, description="e.g. {'M': 16, 'efConstruction': 200}")
    field: Optional[str] = None
    fields: Optional[Union[List[FilteringIndexField], List[str]]] = None
    field_attributes: Optional[List[FieldAttributeValue]] = None
    state: Optional[IndexStateValue] = None
    auto_build: Optional[bool] = None
    # Policies this client cannot parse are kept as plain dicts
    auto_build_policy: Optional[
        Annotated[Union[AutoBuildPolicy, Dict[str, Any]], Field(union_mode="left_to_right")]
    ] = None


class TableSchema(WireModel):
    """Columns and indexes of a table."""
    fields: List[FieldSchema] = Field(default_factory=list)
    indexes: List[IndexSchema] = Field(default_factory=list)

    @field_validator("fields", "indexes", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


class TableDescription(WireModel):
    """Table metadata as returned by ``describe_table``."""
    database: str
    table: str
    create_time: Optional[str] = None
    description: Optional[str] = None
    replication: Optional[int] = None
    partition: Optional[PartitionParams] = None
    enable_dynamic_field: Optional[bool] = None
    state: Optional[TableStateValue] = None
    aliases: List[str] = Field(default_factory=list)
    table_schema: Optional[TableSchema] = Field(None, alias="schema")

    @field_validator("aliases", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return null_as_empty(value)


# Row models
class QueryKey(WireModel):
    """Primary key (and partition key, when it differs) of one row to fetch."""
    primary_key: Dict[str, Any]
    partition_key: Optional[Dict[str, Any]] = None


__all__ = [
    "WireModel",
    "MetricType",
    "IndexType",
    "InvertedIndexAnalyzer",
    "InvertedIndexParseMode",
    "InvertedIndexFieldAttribute",
    "IndexStructureType",
    "FieldType",
    "ElementType",
    "AutoBuildPolicyType",
    "PartitionType",
    "ReadConsistency",
    "TableState",
    "IndexState",
    "ServerErrCode",
    "PartitionParams",
    "FieldSchema",
    "AutoBuildTiming",
    "AutoBuildPeriodical",
    "AutoBuildIncrement",
    "AutoBuildPolicy",
    "FilteringIndexField",
    "IndexSchema",
    "TableSchema",
    "TableDescription",
    "QueryKey"
]
