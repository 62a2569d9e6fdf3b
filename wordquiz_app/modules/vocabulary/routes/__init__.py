"""Routes of the vocabulary module: HTML page and JSON API."""

from .. import vocabulary_api_bp, vocabulary_bp
from . import api, views  # noqa: F401

__all__ = ["vocabulary_bp", "vocabulary_api_bp"]
