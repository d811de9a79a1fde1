from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jobgen.models import SearchRequest

MISSING_REQUIRED_FIELD = "missing_required_field"
QUERY_REQUIRED_MESSAGE = "Search query is required"


class ValidationError(ValueError):
    def __init__(self, message: str, *, field: str, kind: str = MISSING_REQUIRED_FIELD) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.kind = kind


def validate_search_request(payload: SearchRequest | Mapping[str, Any]) -> SearchRequest:
    """Reject a search request without a query; pass everything else through untouched."""
    if isinstance(payload, SearchRequest):
        request = payload
    else:
        request = SearchRequest.model_validate(payload)
    if not request.query:
        raise ValidationError(QUERY_REQUIRED_MESSAGE, field="query")
    return request
