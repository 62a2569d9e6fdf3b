from .topic_service import TopicService
from .vocabulary_service import VocabularyService

__all__ = ["TopicService", "VocabularyService"]
