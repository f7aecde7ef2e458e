"""Prometheus metrics for the knowledge engine."""
from prometheus_client import Counter, Histogram

SEARCH_REQUESTS = Counter(
    "food_rag_search_requests_total",
    "Knowledge searches by outcome.",
    ["outcome"],
)
SEARCH_LATENCY = Histogram(
    "food_rag_search_duration_seconds",
    "Wall time of knowledge searches, including answer synthesis.",
)
ANSWERS_GENERATED = Counter(
    "food_rag_answers_generated_total",
    "Answers synthesized by the language model.",
)
