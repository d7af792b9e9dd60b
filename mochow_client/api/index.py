"""
Index management for vector, inverted and scalar indexes.
Follows Single Responsibility Principle - only manages indexes.
"""

from typing import List

from mochow_client.models.schemas import IndexSchema
from mochow_client.models.responses import CommonResponse, DescIndexResponse
from mochow_client.utils.logger import LoggerMixin
from .base import ResourceAPI, INDEX_URI_PREFIX


class IndexAPI(ResourceAPI, LoggerMixin):
    """Operations on ``/index``."""

    def create_indexes(self, database: str, table: str, indexes: List[IndexSchema]) -> CommonResponse:
        """
        Create one or more indexes on a table.

        Args:
            database: Database name
            table: Table name
            indexes: Index definitions

        Returns:
            CommonResponse
        """
        names = ", ".join(index.index_name for index in indexes)
        self.logger.info(f"Creating indexes [{names}] on '{database}.{table}'")
        body = {
            "database": database,
            "table": table,
            "indexes": [index.to_wire() for index in indexes],
        }
        raw = self.transport.post(INDEX_URI_PREFIX, {"create": ""}, body)
        return CommonResponse.model_validate(raw)

    def drop_index(self, database: str, table: str, index_name: str) -> CommonResponse:
        self.logger.info(f"Dropping index '{index_name}' on '{database}.{table}'")
        body = {"database": database, "table": table, "indexName": index_name}
        raw = self.transport.delete(INDEX_URI_PREFIX, {}, body)
        return CommonResponse.model_validate(raw)

    def describe_index(self, database: str, table: str, index_name: str) -> DescIndexResponse:
        body = {"database": database, "table": table, "indexName": index_name}
        raw = self.transport.post(INDEX_URI_PREFIX, {"desc": ""}, body)
        return DescIndexResponse.model_validate(raw)

    def modify_index(self, database: str, table: str, index: IndexSchema) -> CommonResponse:
        """Change an existing index; currently only its auto-build settings."""
        body = {"database": database, "table": table, "index": index.to_wire()}
        raw = self.transport.post(INDEX_URI_PREFIX, {"modify": ""}, body)
        return CommonResponse.model_validate(raw)

    def rebuild_index(self, database: str, table: str, index_name: str) -> CommonResponse:
        """Start rebuilding a vector index; progress shows in ``describe_index``."""
        self.logger.info(f"Rebuilding index '{index_name}' on '{database}.{table}'")
        body = {"database": database, "table": table, "indexName": index_name}
        raw = self.transport.post(INDEX_URI_PREFIX, {"rebuild": ""}, body)
        return CommonResponse.model_validate(raw)
