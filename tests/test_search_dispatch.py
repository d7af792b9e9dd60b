"""
Tests for search dispatch and the row search entry points.
"""

import pytest
from unittest.mock import MagicMock

from mochow_client.api.dispatch import SearchCall, dispatch_search
from mochow_client.api.row import RowAPI
from mochow_client.api.client import MochowClient
from mochow_client.models.responses import SearchRowResponse, BatchSearchRowResponse
from mochow_client.models.search import (
    Vector,
    VectorTopkSearchRequest,
    VectorBatchSearchRequest,
    BM25SearchRequest,
    HybridSearchRequest
)


class TestDispatchSearch:
    """Test turning requests into calls."""

    def test_single_search(self):
        """Test dispatch of a non-batch request."""
        request = VectorTopkSearchRequest("vector", Vector([0.1, 0.2]), 5)

        call = dispatch_search("book", "book_segments", request)

        assert isinstance(call, SearchCall)
        assert call.action == "search"
        assert call.params == {"search": ""}
        assert call.response_model is SearchRowResponse
        assert call.body["database"] == "book"
        assert call.body["table"] == "book_segments"
        assert call.body["anns"]["params"] == {"limit": 5}

    def test_batch_search(self):
        """Test dispatch of a batch request."""
        request = VectorBatchSearchRequest("vector", [Vector([0.1, 0.2]), Vector([0.2, 0.3])])

        call = dispatch_search("book", "book_segments", request)

        assert call.params == {"batchSearch": ""}
        assert call.response_model is BatchSearchRowResponse

    def test_unknown_request_rejected(self):
        with pytest.raises(TypeError, match="Unsupported search request"):
            dispatch_search("book", "book_segments", {"anns": {}})

    def test_body_does_not_leak_into_request(self):
        """Test that editing the dispatched body leaves the request intact."""
        request = BM25SearchRequest("idx", "Lu Bu")

        call = dispatch_search("book", "book_segments", request)
        call.body["BM25SearchParams"]["searchText"] = "changed"

        assert request.to_dict()["BM25SearchParams"]["searchText"] == "Lu Bu"


class TestRowSearch:
    """Test RowAPI search methods against a mock transport."""

    def setup_method(self):
        self.transport = MagicMock()
        self.rows = RowAPI(self.transport)

    def test_search_posts_to_row(self):
        """Test the request sent and the decoded response."""
        self.transport.post.return_value = {
            "code": 0,
            "msg": "Success",
            "rows": [{"row": {"id": 1}, "distance": 0.12}],
            "searchVectorFloats": [0.1, 0.2],
        }
        request = VectorTopkSearchRequest("vector", Vector([0.1, 0.2]), 1)

        response = self.rows.search("book", "book_segments", request)

        path, params, body = self.transport.post.call_args[0]
        assert path == "/row"
        assert params == {"search": ""}
        assert body["database"] == "book"
        assert isinstance(response, SearchRowResponse)
        assert response.ok
        assert response.rows[0].row == {"id": 1}
        assert response.rows[0].distance == 0.12
        assert response.search_vector_floats == [0.1, 0.2]

    def test_batch_search_response(self):
        """Test that a batch request decodes into one result set per vector."""
        self.transport.post.return_value = {
            "code": 0,
            "msg": "Success",
            "results": [
                {"rows": [{"row": {"id": 1}, "distance": 0.1}], "searchVectorFloats": [0.1]},
                {"rows": [], "searchVectorFloats": [0.2]},
            ],
        }
        request = VectorBatchSearchRequest("vector", [Vector([0.1]), Vector([0.2])])

        response = self.rows.vector_search("book", "book_segments", request)

        assert self.transport.post.call_args[0][1] == {"batchSearch": ""}
        assert isinstance(response, BatchSearchRowResponse)
        assert len(response.results) == 2
        assert response.results[1].rows == []

    def test_hybrid_search_scores(self):
        self.transport.post.return_value = {
            "code": 0,
            "msg": "Success",
            "rows": [{"row": {"id": 3}, "score": 2.5}],
        }
        request = HybridSearchRequest(
            VectorTopkSearchRequest("vector", Vector([0.1]), 3),
            BM25SearchRequest("idx", "Lu Bu"),
            vector_weight=0.5,
            bm25_weight=0.5,
        )

        response = self.rows.hybrid_search("book", "book_segments", request)

        assert response.rows[0].score == 2.5
        assert response.rows[0].distance is None

    def test_server_error_is_returned(self):
        """Test that a non-zero code is reported, not raised."""
        self.transport.post.return_value = {"code": 69, "msg": "Table not exist"}

        response = self.rows.bm25_search("book", "missing", BM25SearchRequest("idx", "text"))

        assert not response.ok
        assert response.code == 69
        assert response.rows == []

    def test_wrong_kind_rejected(self):
        """Test that typed entry points refuse other request kinds."""
        bm25 = BM25SearchRequest("idx", "text")
        vector = VectorTopkSearchRequest("vector", Vector([0.1]), 3)

        with pytest.raises(TypeError):
            self.rows.vector_search("book", "t", bm25)
        with pytest.raises(TypeError):
            self.rows.bm25_search("book", "t", vector)
        with pytest.raises(TypeError):
            self.rows.hybrid_search("book", "t", vector)
        self.transport.post.assert_not_called()


class TestMochowClientSearch:
    """Test the client facade delegates searches."""

    def test_client_delegates_to_rows(self):
        transport = MagicMock()
        transport.post.return_value = {"code": 0, "msg": "Success", "rows": []}

        with MochowClient(transport=transport) as client:
            response = client.bm25_search("book", "t", BM25SearchRequest("idx", "text"))

        assert response.ok
        assert transport.post.call_args[0][0] == "/row"
        transport.close.assert_called_once()
