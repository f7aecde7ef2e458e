"""Mapping of raw vector hits to uniform sources."""
from typing import Any

from knowledge.clients.base import VectorHit
from knowledge.schemas import Source

# Stored documents use different field names depending on when they were
# ingested. Order matters: earlier fields win.
TITLE_FIELDS = ("title", "type")
CONTENT_FIELDS = ("original_text", "text")
DEFAULT_TITLE = "Food Knowledge"


def _first_present(metadata: dict[str, Any], fields: tuple[str, ...]) -> str:
    for name in fields:
        value = metadata.get(name)
        if value:
            return str(value)
    return ""


def hit_to_source(hit: VectorHit) -> Source:
    metadata = hit.metadata or {}
    region = metadata.get("region")
    return Source(
        title=_first_present(metadata, TITLE_FIELDS) or DEFAULT_TITLE,
        content=_first_present(metadata, CONTENT_FIELDS),
        score=hit.score or 0.0,
        region=str(region) if region else None,
    )


def map_sources(hits: list[VectorHit]) -> list[Source]:
    """Map hits in ranking order, dropping those without content."""
    sources = [hit_to_source(h) for h in hits]
    return [s for s in sources if s.content]
