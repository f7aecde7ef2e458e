"""Names, descriptions and input schemas of the food knowledge tools."""
from dataclasses import dataclass, field
from typing import Any

from knowledge.schemas import DEFAULT_TOP_K, QUERY_MAX_LENGTH, TOP_K_MAX, TOP_K_MIN


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


SEARCH_FOOD_TOOL = ToolSpec(
    name="search_food_knowledge",
    description=(
        "Search the food knowledge base for recipes, nutrition, cuisines, ingredients "
        "and cooking tips. Returns relevant passages and, optionally, an AI-generated "
        "answer grounded in them."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The food-related question to search for",
                "minLength": 1,
                "maxLength": QUERY_MAX_LENGTH,
            },
            "topK": {
                "type": "integer",
                "description": f"Number of results ({TOP_K_MIN}-{TOP_K_MAX})",
                "default": DEFAULT_TOP_K,
                "minimum": TOP_K_MIN,
                "maximum": TOP_K_MAX,
            },
            "includeAnswer": {
                "type": "boolean",
                "description": "Generate AI answer",
                "default": True,
            },
        },
        "required": ["query"],
    },
)

LIST_TOPICS_TOOL = ToolSpec(
    name="list_food_topics",
    description="List the food topics covered by the knowledge base.",
    input_schema={"type": "object", "properties": {}, "required": []},
)

TOOLS = (SEARCH_FOOD_TOOL, LIST_TOPICS_TOOL)
