"""
Database management: list, create and drop databases.
"""

from mochow_client.models.responses import CommonResponse, ListDatabaseResponse
from mochow_client.utils.logger import LoggerMixin
from .base import ResourceAPI, DATABASE_URI_PREFIX


class DatabaseAPI(ResourceAPI, LoggerMixin):
    """Operations on ``/database``."""

    def list_databases(self) -> ListDatabaseResponse:
        raw = self.transport.post(DATABASE_URI_PREFIX, {"list": ""}, {})
        return ListDatabaseResponse.model_validate(raw)

    def create_database(self, database: str) -> CommonResponse:
        self.logger.info(f"Creating database '{database}'")
        raw = self.transport.post(DATABASE_URI_PREFIX, {"create": ""}, {"database": database})
        return CommonResponse.model_validate(raw)

    def drop_database(self, database: str) -> CommonResponse:
        """Drop a database. The service refuses while it still holds tables."""
        self.logger.info(f"Dropping database '{database}'")
        raw = self.transport.delete(DATABASE_URI_PREFIX, {}, {"database": database})
        return CommonResponse.model_validate(raw)
