# File: wordquiz_app/modules/vocabulary/services/vocabulary_service.py
# Vocabulary CRUD over the JSON store. Every mutation is a full
# read-modify-write of the collection.

from typing import Any, Dict, Iterable, List, Optional

from flask import current_app

from wordquiz_app.core.error_handlers import NotFoundError, ValidationError
from wordquiz_app.core.signals import vocabulary_created, vocabulary_deleted, vocabulary_updated
from wordquiz_app.extensions import vocabulary_store
from wordquiz_app.store import RECORD_FIELDS, next_id

from ..logics.bulk_parser import parse_bulk_text
from ..logics.search import filter_vocabulary
from ..schemas import VocabularyDTO


def _clean(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def parse_record_id(value: Any) -> int:
    """Accept an int or a numeric string; anything else is a validation error."""
    if isinstance(value, bool):
        raise ValidationError('Valid ID is required')
    if isinstance(value, int):
        return value
    text = _clean(value)
    if not text or not text.lstrip('-').isdigit():
        raise ValidationError('Valid ID is required')
    return int(text)


def require_fields(data: Dict[str, Any], fields: Iterable[str]) -> Dict[str, str]:
    """Return the trimmed values of ``fields``; 400 naming any that are blank."""
    cleaned = {field: _clean(data.get(field)) for field in fields}
    missing = [field for field, value in cleaned.items() if not value]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            errors={field: f'{field.capitalize()} is required' for field in missing},
        )
    return cleaned


def find_by_word(records: List[dict], word: str, exclude_id: Optional[int] = None) -> Optional[dict]:
    """Case-insensitive lookup on ``word``."""
    needle = word.strip().lower()
    for record in records:
        if record['word'].strip().lower() == needle and record['id'] != exclude_id:
            return record
    return None


class VocabularyService:
    """Operations on vocabulary records."""

    @staticmethod
    def list_vocabulary(search: Optional[str] = None) -> List[dict]:
        return filter_vocabulary(vocabulary_store.load(), search)

    @staticmethod
    def get_vocabulary(record_id: Any) -> dict:
        record_id = parse_record_id(record_id)
        for record in vocabulary_store.load():
            if record['id'] == record_id:
                return record
        raise NotFoundError('Vocabulary not found', resource='vocabulary')

    @staticmethod
    def create_vocabulary(data: Dict[str, Any]) -> dict:
        fields = require_fields(data or {}, RECORD_FIELDS)
        records = vocabulary_store.load()

        if find_by_word(records, fields['word']):
            raise ValidationError('Word already exists', errors={'word': 'Word already exists'})

        record = VocabularyDTO(id=next_id(records), **fields).to_dict()
        records.append(record)
        vocabulary_store.save(records)

        vocabulary_created.send(current_app._get_current_object(), record=record)
        return record

    @staticmethod
    def update_vocabulary(data: Dict[str, Any]) -> dict:
        fields = require_fields(data or {}, ('id',) + RECORD_FIELDS)
        record_id = parse_record_id(fields.pop('id'))

        records = vocabulary_store.load()
        index = next((i for i, r in enumerate(records) if r['id'] == record_id), None)
        if index is None:
            raise NotFoundError('Vocabulary not found', resource='vocabulary')

        if find_by_word(records, fields['word'], exclude_id=record_id):
            raise ValidationError('Word already exists', errors={'word': 'Word already exists'})

        previous = records[index]
        records[index] = VocabularyDTO(id=record_id, **fields).to_dict()
        vocabulary_store.save(records)

        vocabulary_updated.send(current_app._get_current_object(), record=records[index], previous=previous)
        return records[index]

    @staticmethod
    def delete_vocabulary(record_id: Any) -> dict:
        if record_id in (None, ''):
            raise ValidationError('Valid ID is required')
        record_id = parse_record_id(record_id)

        records = vocabulary_store.load()
        remaining = [r for r in records if r['id'] != record_id]
        if len(remaining) == len(records):
            raise NotFoundError('Vocabulary not found', resource='vocabulary')

        deleted = next(r for r in records if r['id'] == record_id)
        vocabulary_store.save(remaining)

        vocabulary_deleted.send(current_app._get_current_object(), record=deleted)
        return deleted

    @staticmethod
    def bulk_add(topic: Any, text: str) -> Dict[str, list]:
        """Add every ``word:meaning[:phonetic]`` line of ``text`` to ``topic``."""
        topic = _clean(topic)
        if not topic:
            raise ValidationError('Topic is required', errors={'topic': 'Topic is required'})
        if text is None:
            text = ''
        if not isinstance(text, str):
            raise ValidationError('Text must be a string', errors={'text': 'Text must be a string'})
        entries = parse_bulk_text(text)
        for entry in entries:
            entry['topic'] = topic
        return VocabularyService.import_records(entries)

    @staticmethod
    def import_records(entries: List[Dict[str, Any]], replace: bool = False) -> Dict[str, list]:
        """Append ``entries`` in one write, skipping duplicate or incomplete words."""
        records = [] if replace else vocabulary_store.load()
        added, skipped = [], []

        for entry in entries:
            fields = {field: _clean(entry.get(field)) for field in RECORD_FIELDS}
            if not fields['phonetic']:
                fields['phonetic'] = fields['word']
            if not fields['word'] or not fields['meaning'] or not fields['topic']:
                skipped.append(fields['word'])
                continue
            if find_by_word(records, fields['word']):
                skipped.append(fields['word'])
                continue
            record = VocabularyDTO(id=next_id(records), **fields).to_dict()
            records.append(record)
            added.append(record)

        if added or replace:
            vocabulary_store.save(records)

        app = current_app._get_current_object()
        for record in added:
            vocabulary_created.send(app, record=record)
        if skipped:
            current_app.logger.info("Bulk add skipped %d entries: %s", len(skipped), ', '.join(skipped))
        return {'added': added, 'skipped': skipped}

    @staticmethod
    def assign_topic(record_ids: Iterable[Any], topic: Any) -> List[dict]:
        """Move the selected records into ``topic``."""
        topic = _clean(topic)
        if not topic:
            raise ValidationError('Topic is required', errors={'topic': 'Topic is required'})
        if not isinstance(record_ids, (list, tuple)):
            raise ValidationError('ids must be a list of record ids', errors={'ids': 'ids must be a list'})
        wanted = {parse_record_id(value) for value in (record_ids or [])}
        if not wanted:
            raise ValidationError('Select at least one word')

        records = vocabulary_store.load()
        known = {r['id'] for r in records}
        unknown = sorted(wanted - known)
        if unknown:
            raise NotFoundError(
                f"Vocabulary not found: {', '.join(str(i) for i in unknown)}", resource='vocabulary'
            )

        app = current_app._get_current_object()
        moved = []
        for index, record in enumerate(records):
            if record['id'] in wanted and record['topic'] != topic:
                previous = record
                records[index] = dict(record, topic=topic)
                moved.append((records[index], previous))
        if moved:
            vocabulary_store.save(records)
        for record, previous in moved:
            vocabulary_updated.send(app, record=record, previous=previous)
        return [record for record, _ in moved]
