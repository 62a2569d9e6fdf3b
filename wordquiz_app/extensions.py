"""Application-wide extensions.

Extension instances live here so blueprints and services can import them
without circular imports.
"""

from flask_wtf import CSRFProtect

from .store import VocabularyStore

csrf_protect = CSRFProtect()
vocabulary_store = VocabularyStore()

__all__ = ["csrf_protect", "vocabulary_store"]
