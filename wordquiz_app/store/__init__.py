"""Flat-file storage for the vocabulary collection."""

from .json_store import RECORD_FIELDS, VocabularyStore, next_id

__all__ = ["RECORD_FIELDS", "VocabularyStore", "next_id"]
