"""Routes of the quiz module: HTML page and JSON API."""

from .. import quiz_api_bp, quiz_bp
from . import api, views  # noqa: F401

__all__ = ["quiz_bp", "quiz_api_bp"]
