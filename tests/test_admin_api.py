"""
Tests for database, table and index management.
"""

import pytest
from unittest.mock import patch, MagicMock

from mochow_client.api.database import DatabaseAPI
from mochow_client.api.table import TableAPI
from mochow_client.api.index import IndexAPI
from mochow_client.api.client import MochowClient, create_client
from mochow_client.models.schemas import (
    FieldSchema,
    FieldType,
    IndexSchema,
    IndexType,
    MetricType,
    PartitionParams,
    TableSchema,
    TableState,
    InvertedIndexAnalyzer,
    AutoBuildIncrement,
    AutoBuildTiming
)
from mochow_client.exceptions import ConfigurationError


def book_schema():
    fields = [
        FieldSchema(field_name="id", field_type=FieldType.STRING, primary_key=True,
                    partition_key=True, not_null=True),
        FieldSchema(field_name="bookName", field_type=FieldType.STRING, not_null=True),
        FieldSchema(field_name="segment", field_type=FieldType.TEXT),
        FieldSchema(field_name="vector", field_type=FieldType.FLOAT_VECTOR, not_null=True, dimension=3),
    ]
    indexes = [
        IndexSchema(index_name="vector_idx", index_type=IndexType.HNSW, field="vector",
                    metric_type=MetricType.L2, params={"M": 32, "efConstruction": 200}),
        IndexSchema(index_name="book_name_idx", index_type=IndexType.SECONDARY_INDEX, field="bookName"),
        IndexSchema(index_name="book_segment_inverted_idx", index_type=IndexType.INVERTED_INDEX,
                    fields=["segment"], params={"analyzer": InvertedIndexAnalyzer.CHINESE_ANALYZER.value}),
    ]
    return TableSchema(fields=fields, indexes=indexes)


class TestDatabaseAPI:
    """Test database operations."""

    def setup_method(self):
        self.transport = MagicMock()
        self.transport.post.return_value = {"code": 0, "msg": "Success"}
        self.transport.delete.return_value = {"code": 0, "msg": "Success"}
        self.api = DatabaseAPI(self.transport)

    def test_list_databases(self):
        self.transport.post.return_value = {"code": 0, "msg": "Success", "databases": ["book", "music"]}

        response = self.api.list_databases()

        self.transport.post.assert_called_once_with("/database", {"list": ""}, {})
        assert response.databases == ["book", "music"]

    def test_create_database(self):
        response = self.api.create_database("book")

        self.transport.post.assert_called_once_with("/database", {"create": ""}, {"database": "book"})
        assert response.ok

    def test_drop_database_uses_delete(self):
        self.api.drop_database("book")

        self.transport.delete.assert_called_once_with("/database", {}, {"database": "book"})
        self.transport.post.assert_not_called()


class TestTableAPI:
    """Test table operations."""

    def setup_method(self):
        self.transport = MagicMock()
        self.transport.post.return_value = {"code": 0, "msg": "Success"}
        self.transport.delete.return_value = {"code": 0, "msg": "Success"}
        self.api = TableAPI(self.transport)

    def test_create_table_body(self):
        """Test the wire form of a table definition."""
        self.api.create_table(
            "book",
            "book_segments",
            replication=3,
            partition=PartitionParams(partition_num=1),
            schema=book_schema(),
            description="basic test",
            enable_dynamic_field=False,
        )

        path, params, body = self.transport.post.call_args[0]
        assert path == "/table"
        assert params == {"create": ""}
        assert body["replication"] == 3
        assert body["description"] == "basic test"
        assert body["enableDynamicField"] is False
        assert body["partition"] == {"partitionType": "HASH", "partitionNum": 1}

        fields = body["schema"]["fields"]
        assert fields[0] == {
            "fieldName": "id",
            "fieldType": "STRING",
            "primaryKey": True,
            "partitionKey": True,
            "notNull": True,
        }
        assert fields[3]["dimension"] == 3

        indexes = body["schema"]["indexes"]
        assert indexes[0] == {
            "indexName": "vector_idx",
            "indexType": "HNSW",
            "metricType": "L2",
            "params": {"M": 32, "efConstruction": 200},
            "field": "vector",
        }
        assert indexes[1]["indexType"] == "SECONDARY"
        assert indexes[2]["fields"] == ["segment"]

    def test_create_table_omits_unset_options(self):
        self.api.create_table("book", "t", replication=1,
                              partition=PartitionParams(partition_num=2), schema=TableSchema())

        body = self.transport.post.call_args[0][2]
        assert "description" not in body
        assert "enableDynamicField" not in body

    def test_drop_table_uses_delete(self):
        self.api.drop_table("book", "book_segments")

        self.transport.delete.assert_called_once_with(
            "/table", {}, {"database": "book", "table": "book_segments"}
        )

    def test_describe_table(self):
        self.transport.post.return_value = {
            "code": 0,
            "msg": "Success",
            "table": {
                "database": "book",
                "table": "book_segments",
                "createTime": "2024-01-01T00:00:00Z",
                "replication": 3,
                "partition": {"partitionType": "HASH", "partitionNum": 1},
                "state": "NORMAL",
                "aliases": [],
                "schema": {
                    "fields": [{"fieldName": "id", "fieldType": "STRING", "primaryKey": True}],
                    "indexes": [{"indexName": "vector_idx", "indexType": "HNSW", "state": "BUILDING"}],
                },
            },
        }

        response = self.api.describe_table("book", "book_segments")

        assert self.transport.post.call_args[0][1] == {"desc": ""}
        assert response.table.state == TableState.NORMAL
        assert response.table.partition.partition_num == 1
        assert response.table.table_schema.fields[0].field_name == "id"
        assert response.table.table_schema.indexes[0].state.value == "BUILDING"

    def test_list_and_stats(self):
        self.transport.post.return_value = {"code": 0, "msg": "", "tables": ["a", "b"]}
        assert self.api.list_tables("book").tables == ["a", "b"]
        self.transport.post.assert_called_with("/table", {"list": ""}, {"database": "book"})

        self.transport.post.return_value = {
            "code": 0, "msg": "", "rowCount": 10, "memorySizeInByte": 2048, "diskSizeInByte": 4096
        }
        stats = self.api.show_table_stats("book", "a")
        assert stats.row_count == 10
        assert stats.disk_size_in_byte == 4096

    def test_alias_and_add_field(self):
        self.api.alias_table("book", "book_segments", "segments")
        self.transport.post.assert_called_with(
            "/table", {"alias": ""}, {"database": "book", "table": "book_segments", "alias": "segments"}
        )

        self.api.unalias_table("book", "book_segments", "segments")
        assert self.transport.post.call_args[0][1] == {"unalias": ""}

        extra = TableSchema(fields=[FieldSchema(field_name="bookAlias", field_type=FieldType.STRING)])
        self.api.add_field("book", "book_segments", extra)
        path, params, body = self.transport.post.call_args[0]
        assert params == {"addField": ""}
        assert body["schema"] == {"fields": [{"fieldName": "bookAlias", "fieldType": "STRING"}], "indexes": []}


class TestIndexAPI:
    """Test index operations."""

    def setup_method(self):
        self.transport = MagicMock()
        self.transport.post.return_value = {"code": 0, "msg": "Success"}
        self.transport.delete.return_value = {"code": 0, "msg": "Success"}
        self.api = IndexAPI(self.transport)

    def test_create_indexes_with_auto_build(self):
        index = IndexSchema(
            index_name="vector_idx",
            index_type=IndexType.HNSW,
            field="vector",
            metric_type=MetricType.COSINE,
            params={"M": 16, "efConstruction": 100},
            auto_build=True,
            auto_build_policy=AutoBuildIncrement(row_count_increment=5000),
        )

        self.api.create_indexes("book", "book_segments", [index])

        path, params, body = self.transport.post.call_args[0]
        assert (path, params) == ("/index", {"create": ""})
        sent = body["indexes"][0]
        assert sent["autoBuild"] is True
        assert sent["autoBuildPolicy"] == {"policyType": "ROW_COUNT_INCREMENT", "rowCountIncrement": 5000}

    def test_modify_index(self):
        index = IndexSchema(
            index_name="vector_idx",
            index_type=IndexType.HNSW,
            auto_build=True,
            auto_build_policy=AutoBuildTiming(timing="2024-06-06 00:00:00"),
        )

        self.api.modify_index("book", "book_segments", index)

        path, params, body = self.transport.post.call_args[0]
        assert params == {"modify": ""}
        assert body["index"]["autoBuildPolicy"] == {"policyType": "TIMING", "timing": "2024-06-06 00:00:00"}

    def test_drop_index_uses_delete(self):
        self.api.drop_index("book", "book_segments", "vector_idx")

        self.transport.delete.assert_called_once_with(
            "/index", {}, {"database": "book", "table": "book_segments", "indexName": "vector_idx"}
        )

    def test_describe_and_rebuild(self):
        self.transport.post.return_value = {
            "code": 0,
            "msg": "",
            "index": {"indexName": "vector_idx", "indexType": "HNSW", "metricType": "L2", "state": "NORMAL"},
        }

        response = self.api.describe_index("book", "book_segments", "vector_idx")
        assert response.index.metric_type == MetricType.L2

        self.api.rebuild_index("book", "book_segments", "vector_idx")
        assert self.transport.post.call_args[0][1] == {"rebuild": ""}


class TestMochowClient:
    """Test client construction."""

    def test_modules_share_transport(self):
        transport = MagicMock()
        client = MochowClient(transport=transport)

        assert client.databases.transport is transport
        assert client.tables.transport is transport
        assert client.indexes.transport is transport
        assert client.rows.transport is transport

    def test_create_client(self):
        client = create_client("http://localhost:8287", "root", "secret", max_retries=0)

        assert client.config.base_url == "http://localhost:8287/v1"
        assert client.transport.session.headers["Authorization"] == "Bearer account=root&api_key=secret"
        client.close()

    @patch('mochow_client.config.client_config.settings')
    def test_create_client_without_credentials(self, mock_settings):
        mock_settings.ACCOUNT = None
        mock_settings.API_KEY = None

        with pytest.raises(ConfigurationError):
            create_client("http://localhost:8287")
