# File: wordquiz_app/config.py
# Application configuration, read from the environment (.env supported).

import os

from dotenv import load_dotenv

load_dotenv()

# Project root: this file lives in <root>/wordquiz_app/
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Default location of the vocabulary datastore
VOCABULARY_PATH = os.path.join(BASE_DIR, 'data', 'vocabulary.json')


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Configuration for the WordQuiz Flask app."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # JSON file holding the whole vocabulary collection
    VOCABULARY_FILE = os.environ.get('VOCABULARY_FILE') or VOCABULARY_PATH

    # Fail requests on a corrupt store file instead of treating it as empty
    VOCABULARY_STRICT_LOAD = _env_bool('VOCABULARY_STRICT_LOAD', True)

    ITEMS_PER_PAGE = int(os.environ.get('ITEMS_PER_PAGE', 10))

    # Quiz settings
    QUIZ_MIN_VOCABULARY = int(os.environ.get('QUIZ_MIN_VOCABULARY', 4))
    QUIZ_CHOICES = int(os.environ.get('QUIZ_CHOICES', 4))
    QUIZ_FEEDBACK_DELAY_MS = int(os.environ.get('QUIZ_FEEDBACK_DELAY_MS', 1500))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = _env_bool('LOG_JSON', False)

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes into."""
        os.makedirs(os.path.dirname(os.path.abspath(app.config['VOCABULARY_FILE'])), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
