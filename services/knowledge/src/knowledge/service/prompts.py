"""Prompt assembly for answer synthesis."""
from knowledge.schemas import Source

ANSWER_PROMPT_TEMPLATE = """You are a helpful food knowledge assistant. Answer based on this context:

{context}

Question: {query}

Provide a clear, helpful answer. If the context doesn't have the info, say so."""


def build_context(sources: list[Source]) -> str:
    return "\n\n".join(s.content for s in sources)


def build_answer_prompt(query: str, sources: list[Source]) -> str:
    return ANSWER_PROMPT_TEMPLATE.format(context=build_context(sources), query=query)


def build_messages(query: str, sources: list[Source]) -> list[dict[str, str]]:
    """Single user-role message carrying context and question."""
    return [{"role": "user", "content": build_answer_prompt(query, sources)}]
