"""Shared building blocks for the food RAG services."""
