# File: wordquiz_app/modules/vocabulary/services/topic_service.py
# Topics are not stored on their own: they are the distinct ``topic`` values
# of the records, created and removed implicitly.

from collections import Counter
from typing import Any, Dict, List

from flask import current_app

from wordquiz_app.core.error_handlers import NotFoundError, ValidationError
from wordquiz_app.core.signals import topic_deleted, topic_renamed
from wordquiz_app.extensions import vocabulary_store

from ..schemas import TopicStat


def _clean_name(value: Any) -> str:
    if not isinstance(value, str):
        return ''
    return value.strip()


class TopicService:
    """Operations on topics derived from the vocabulary records."""

    @staticmethod
    def list_topics() -> List[dict]:
        counts = Counter(r['topic'] for r in vocabulary_store.load())
        return [TopicStat(name=name, count=counts[name]).to_dict() for name in sorted(counts)]

    @staticmethod
    def create_topic(name: Any) -> Dict[str, str]:
        """Validate a new topic name. Nothing is written until a word uses it."""
        topic = _clean_name(name)
        if not topic:
            raise ValidationError('Topic name is required')

        if any(r['topic'] == topic for r in vocabulary_store.load()):
            raise ValidationError('Topic already exists')

        return {'message': 'Topic created successfully', 'topic': topic}

    @staticmethod
    def rename_topic(old_name: Any, new_name: Any) -> Dict[str, Any]:
        old_topic, new_topic = _clean_name(old_name), _clean_name(new_name)
        if not old_topic or not new_topic:
            raise ValidationError('Old name and new name are required')
        if old_topic == new_topic:
            raise ValidationError('New name must be different from old name')

        records = vocabulary_store.load()
        updated_count = sum(1 for r in records if r['topic'] == old_topic)
        if not updated_count:
            raise NotFoundError('Topic not found', resource='topic')
        if any(r['topic'] == new_topic for r in records):
            raise ValidationError('New topic name already exists')

        records = [dict(r, topic=new_topic) if r['topic'] == old_topic else r for r in records]
        vocabulary_store.save(records)

        topic_renamed.send(
            current_app._get_current_object(),
            old_name=old_topic,
            new_name=new_topic,
            updated_count=updated_count,
        )
        return {
            'message': f'Topic renamed from "{old_topic}" to "{new_topic}"',
            'updatedCount': updated_count,
        }

    @staticmethod
    def delete_topic(name: Any) -> Dict[str, Any]:
        """Delete the topic together with every word in it."""
        topic = _clean_name(name)
        if not topic:
            raise ValidationError('Topic name is required')

        records = vocabulary_store.load()
        remaining = [r for r in records if r['topic'] != topic]
        deleted_count = len(records) - len(remaining)
        if not deleted_count:
            raise NotFoundError('Topic not found', resource='topic')

        vocabulary_store.save(remaining)

        topic_deleted.send(current_app._get_current_object(), name=topic, deleted_count=deleted_count)
        return {
            'message': f'Topic "{topic}" and {deleted_count} words deleted successfully',
            'deletedCount': deleted_count,
        }
