"""Search query and result models."""
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StringConstraints

QUERY_MAX_LENGTH = 500
TOP_K_MIN = 1
TOP_K_MAX = 10
DEFAULT_TOP_K = 3

QueryText = Annotated[
    str,
    StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=QUERY_MAX_LENGTH),
]


class SearchQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    query: QueryText
    top_k: StrictInt = Field(
        DEFAULT_TOP_K,
        ge=TOP_K_MIN,
        le=TOP_K_MAX,
        validation_alias=AliasChoices("topK", "top_k"),
        serialization_alias="topK",
    )
    include_answer: StrictBool = Field(
        True,
        validation_alias=AliasChoices("includeAnswer", "include_answer"),
        serialization_alias="includeAnswer",
    )


class Source(BaseModel):
    """One retrieved passage."""

    title: str
    content: str
    score: float
    region: str | None = None


class SearchResult(BaseModel):
    answer: str | None = None
    sources: list[Source] = Field(default_factory=list)
