"""
Tests for the names exported by the package.
"""

import mochow_client
from mochow_client import models


class TestPublicNamespace:
    """Test that star re-exports carry only client names."""

    def test_client_names_exported(self):
        for name in ("MochowClient", "create_client", "IndexType", "SearchRowResponse",
                     "VectorTopkSearchRequest", "HybridSearchRequest", "ServerError"):
            assert hasattr(mochow_client, name), name

    def test_third_party_names_not_exported(self):
        for name in ("BaseModel", "Field", "ConfigDict", "Enum", "IntEnum", "to_camel",
                     "Literal", "field_validator", "null_as_empty"):
            assert not hasattr(mochow_client, name), name

    def test_models_all_lists_defined_names(self):
        assert "BaseModel" not in models.__all__
        for name in models.__all__:
            assert hasattr(models, name), name
