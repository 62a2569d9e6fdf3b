"""
JSON file datastore for the vocabulary collection.

The whole collection is the unit of storage: one file holds a JSON array of
records, read wholesale and rewritten wholesale on every mutation.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from ..core.error_handlers import StoreError
from ..core.logging_config import get_logger

logger = get_logger('store')

RECORD_FIELDS = ('word', 'meaning', 'phonetic', 'topic')


def next_id(records: List[dict]) -> int:
    """Next record id: max(existing) + 1, or 1 for an empty collection."""
    if not records:
        return 1
    return max(r['id'] for r in records) + 1


class VocabularyStore:
    """Read/write the vocabulary JSON file.

    ``strict`` controls what happens when the file exists but cannot be
    parsed: raise ``StoreError`` (strict) or log and return an empty list.
    """

    def __init__(self, path: Optional[str] = None, strict: bool = True):
        self.path = Path(path) if path else None
        self.strict = strict

    def init_app(self, app) -> None:
        self.path = Path(app.config['VOCABULARY_FILE'])
        self.strict = app.config.get('VOCABULARY_STRICT_LOAD', True)
        app.extensions['vocabulary_store'] = self
        app.logger.info("Vocabulary store: %s (strict=%s)", self.path, self.strict)

    def _require_path(self) -> Path:
        if self.path is None:
            raise RuntimeError("VocabularyStore not initialized. Call init_app() first.")
        return self.path

    def _corrupt(self, reason: str) -> List[dict]:
        path = self._require_path()
        if self.strict:
            logger.error("Vocabulary file %s is corrupt: %s", path, reason)
            raise StoreError(f"Vocabulary file is corrupt: {reason}", path=str(path))
        logger.warning("Vocabulary file %s is corrupt (%s); treating it as empty", path, reason)
        return []

    def load(self) -> List[dict]:
        """Parse the whole file into a list of records."""
        path = self._require_path()
        if not path.exists():
            return []

        try:
            with path.open('r', encoding='utf-8') as f:
                raw = f.read()
        except OSError as e:
            logger.error("Error reading vocabulary file %s: %s", path, e)
            raise StoreError("Failed to read vocabulary", path=str(path)) from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            return self._corrupt(f"invalid JSON ({e})")

        if not isinstance(data, list):
            return self._corrupt("top-level value is not an array")

        records = []
        for position, item in enumerate(data):
            if not isinstance(item, dict) or isinstance(item.get('id'), bool) or not isinstance(item.get('id'), int):
                return self._corrupt(f"entry {position} has no integer id")
            record = {'id': item['id']}
            for field in RECORD_FIELDS:
                value = item.get(field)
                record[field] = '' if value is None else str(value)
            records.append(record)
        return records

    def save(self, records: List[dict]) -> None:
        """Serialize the whole collection back to disk, pretty-printed."""
        path = self._require_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix='.vocabulary-', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.error("Error writing vocabulary file %s: %s", path, e)
            raise StoreError("Failed to save vocabulary", path=str(path)) from e
