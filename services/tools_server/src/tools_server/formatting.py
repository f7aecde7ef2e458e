"""Markdown rendering of tool results for AI assistants."""
from knowledge.schemas import SearchResult
from knowledge.tools import SEARCH_FOOD_TOOL

NO_RESULTS = (
    "No relevant information found in the food knowledge base. "
    "Try rephrasing your question or asking about a different food topic."
)


def format_search_result(result: SearchResult) -> str:
    if not result.sources:
        return NO_RESULTS
    parts: list[str] = []
    if result.answer:
        parts.append(f"## Answer\n\n{result.answer}\n\n")
    parts.append(f"## Sources ({len(result.sources)} found)\n\n")
    for i, source in enumerate(result.sources, 1):
        line = f"### {i}. {source.title}\n**Relevance:** {source.score * 100:.1f}%"
        if source.region:
            line += f" | **Region:** {source.region}"
        parts.append(f"{line}\n\n{source.content}\n\n---\n\n")
    return "".join(parts)


def format_topics(topics: list[str]) -> str:
    lines = [
        "## Available Food Topics",
        "",
        "The Food RAG knowledge base can answer questions about:",
        "",
    ]
    lines.extend(f"{i}. **{topic}**" for i, topic in enumerate(topics, 1))
    lines.extend([
        "",
        "---",
        "",
        f"**Tip:** Use the `{SEARCH_FOOD_TOOL.name}` tool with a specific question "
        "to get detailed answers with sources.",
    ])
    return "\n".join(lines)
