"""
Turns a search request into the concrete call: body, query-action tag and
the response model to decode into.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Type, Union

from mochow_client.models.responses import SearchRowResponse, BatchSearchRowResponse
from mochow_client.models.search import SEARCH_REQUEST_TYPES, SearchRequest


@dataclass(frozen=True)
class SearchCall:
    """A fully dispatched search: POST ``/row?<action>=`` with ``body``."""
    action: str
    body: Dict[str, Any] = field(default_factory=dict)
    response_model: Type[Union[SearchRowResponse, BatchSearchRowResponse]] = SearchRowResponse

    @property
    def params(self) -> Dict[str, str]:
        return {self.action: ""}


def dispatch_search(database: str, table: str, request: SearchRequest) -> SearchCall:
    """
    Compose ``request`` and address it to ``database``/``table``.

    Args:
        database: Database name
        table: Table name
        request: Any search request kind

    Returns:
        SearchCall carrying body, action tag and response model

    Raises:
        TypeError: If ``request`` is not a known search request kind
    """
    if not isinstance(request, SEARCH_REQUEST_TYPES):
        raise TypeError(f"Unsupported search request: {type(request).__name__}")

    body = request.to_dict()
    body["database"] = database
    body["table"] = table

    response_model = BatchSearchRowResponse if request.is_batch() else SearchRowResponse
    return SearchCall(action=request.request_type(), body=body, response_model=response_model)
