"""
Table management: create, drop, list, describe, alias and inspect tables.
"""

from typing import Optional

from mochow_client.models.schemas import PartitionParams, TableSchema
from mochow_client.models.responses import (
    CommonResponse,
    DescTableResponse,
    ListTableResponse,
    ShowTableStatsResponse
)
from mochow_client.utils.logger import LoggerMixin
from .base import ResourceAPI, TABLE_URI_PREFIX


class TableAPI(ResourceAPI, LoggerMixin):
    """Operations on ``/table``."""

    def create_table(
        self,
        database: str,
        table: str,
        replication: int,
        partition: PartitionParams,
        schema: TableSchema,
        description: Optional[str] = None,
        enable_dynamic_field: Optional[bool] = None
    ) -> CommonResponse:
        """
        Create a table. Creation is asynchronous on the service side; the
        table is usable once ``describe_table`` reports state NORMAL.

        Args:
            database: Database name
            table: Table name
            replication: Number of replicas per partition
            partition: Partitioning scheme
            schema: Fields and indexes
            description: Optional free-text description
            enable_dynamic_field: Whether rows may carry undeclared fields

        Returns:
            CommonResponse
        """
        body = self._body(
            database=database,
            table=table,
            description=description,
            replication=replication,
            partition=partition.to_wire(),
            enableDynamicField=enable_dynamic_field,
            schema=schema.to_wire(),
        )
        self.logger.info(f"Creating table '{database}.{table}' with {len(schema.fields)} fields")
        raw = self.transport.post(TABLE_URI_PREFIX, {"create": ""}, body)
        return CommonResponse.model_validate(raw)

    def drop_table(self, database: str, table: str) -> CommonResponse:
        self.logger.info(f"Dropping table '{database}.{table}'")
        raw = self.transport.delete(TABLE_URI_PREFIX, {}, {"database": database, "table": table})
        return CommonResponse.model_validate(raw)

    def list_tables(self, database: str) -> ListTableResponse:
        raw = self.transport.post(TABLE_URI_PREFIX, {"list": ""}, {"database": database})
        return ListTableResponse.model_validate(raw)

    def describe_table(self, database: str, table: str) -> DescTableResponse:
        raw = self.transport.post(TABLE_URI_PREFIX, {"desc": ""}, {"database": database, "table": table})
        return DescTableResponse.model_validate(raw)

    def add_field(self, database: str, table: str, schema: TableSchema) -> CommonResponse:
        """Add the fields listed in ``schema`` to an existing table."""
        body = {"database": database, "table": table, "schema": schema.to_wire()}
        raw = self.transport.post(TABLE_URI_PREFIX, {"addField": ""}, body)
        return CommonResponse.model_validate(raw)

    def alias_table(self, database: str, table: str, alias: str) -> CommonResponse:
        body = {"database": database, "table": table, "alias": alias}
        raw = self.transport.post(TABLE_URI_PREFIX, {"alias": ""}, body)
        return CommonResponse.model_validate(raw)

    def unalias_table(self, database: str, table: str, alias: str) -> CommonResponse:
        body = {"database": database, "table": table, "alias": alias}
        raw = self.transport.post(TABLE_URI_PREFIX, {"unalias": ""}, body)
        return CommonResponse.model_validate(raw)

    def show_table_stats(self, database: str, table: str) -> ShowTableStatsResponse:
        raw = self.transport.post(TABLE_URI_PREFIX, {"stats": ""}, {"database": database, "table": table})
        return ShowTableStatsResponse.model_validate(raw)
