from knowledge.service.search_service import KnowledgeService
from knowledge.service.topics import FOOD_TOPICS, list_topics

__all__ = ["FOOD_TOPICS", "KnowledgeService", "list_topics"]
