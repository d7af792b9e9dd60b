"""
Full-text (BM25) search request against an inverted index.
"""

from typing import Any, Dict
from pydantic import Field

from .base import SearchRequestBase


class BM25SearchRequest(SearchRequestBase):
    """
    Rank rows by BM25 relevance of ``search_text`` within an inverted index.

    Unlike vector search, the common fields (including filter and limit) are
    sent at the top level of the body.
    """

    index_name: str = Field(..., min_length=1, frozen=True, description="Name of the INVERTED index")
    search_text: str = Field(..., min_length=1, frozen=True)

    def __init__(self, index_name: str, search_text: str, **data: Any) -> None:
        super().__init__(index_name=index_name, search_text=search_text, **data)

    def to_dict(self) -> Dict[str, Any]:
        fields = self._common_fields_to_dict()
        fields["BM25SearchParams"] = {
            "indexName": self.index_name,
            "searchText": self.search_text,
        }
        return fields
