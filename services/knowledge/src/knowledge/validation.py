"""Search input validation."""
from collections.abc import Mapping
from typing import Any

import pydantic

from knowledge.errors import ValidationError
from knowledge.schemas import QUERY_MAX_LENGTH, TOP_K_MAX, TOP_K_MIN, SearchQuery

_WIRE_NAMES = {"top_k": "topK", "include_answer": "includeAnswer"}

_CONSTRAINTS = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "must not be empty",
    "string_too_long": f"must be at most {QUERY_MAX_LENGTH} characters",
    "int_type": "must be an integer",
    "greater_than_equal": f"must be between {TOP_K_MIN} and {TOP_K_MAX}",
    "less_than_equal": f"must be between {TOP_K_MIN} and {TOP_K_MAX}",
    "bool_type": "must be a boolean",
}


def validate_search_query(raw: Mapping[str, Any] | SearchQuery) -> SearchQuery:
    """Normalize untrusted search params into a SearchQuery.

    Keys set to None count as absent. Raises ValidationError naming the first
    offending field.
    """
    if isinstance(raw, SearchQuery):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        raise ValidationError("params", "must be an object")
    data = {k: v for k, v in raw.items() if v is not None}
    try:
        return SearchQuery.model_validate(data)
    except pydantic.ValidationError as e:
        err = e.errors()[0]
        loc = str(err["loc"][0]) if err["loc"] else "params"
        field = _WIRE_NAMES.get(loc, loc)
        constraint = _CONSTRAINTS.get(err["type"], err["msg"])
        raise ValidationError(field, constraint) from None
