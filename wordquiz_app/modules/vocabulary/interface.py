"""Public entry points of the vocabulary module for other modules."""

from typing import Dict, List, Optional

from .services import TopicService, VocabularyService


def get_all_vocabulary(search: Optional[str] = None) -> List[dict]:
    """All records, optionally filtered by a search term."""
    return VocabularyService.list_vocabulary(search)


def get_topic_stats() -> List[Dict]:
    """Distinct topics with their word counts."""
    return TopicService.list_topics()
