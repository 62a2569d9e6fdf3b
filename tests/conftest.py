import json
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wordquiz_app import create_app
from wordquiz_app.config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    WTF_CSRF_ENABLED = False
    VOCABULARY_STRICT_LOAD = True
    ITEMS_PER_PAGE = 10
    QUIZ_MIN_VOCABULARY = 4
    QUIZ_CHOICES = 4
    LOG_DIR = None


ANIMALS = [
    {'id': 1, 'word': '猫', 'meaning': 'con mèo', 'phonetic': 'ねこ', 'topic': 'Animals'},
    {'id': 2, 'word': '犬', 'meaning': 'con chó', 'phonetic': 'いぬ', 'topic': 'Animals'},
    {'id': 3, 'word': '水', 'meaning': 'nước', 'phonetic': 'みず', 'topic': 'Nature'},
    {'id': 4, 'word': '山', 'meaning': 'núi', 'phonetic': 'やま', 'topic': 'Nature'},
]


def write_records(path, records):
    path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding='utf-8')


def read_records(path):
    return json.loads(path.read_text(encoding='utf-8'))


@pytest.fixture
def store_file(tmp_path):
    return tmp_path / 'data' / 'vocabulary.json'


@pytest.fixture
def make_app(store_file):
    def _make(**overrides):
        attrs = {'VOCABULARY_FILE': str(store_file)}
        attrs.update(overrides)
        config_class = type('BoundTestConfig', (TestConfig,), attrs)
        return create_app(config_class)
    return _make


@pytest.fixture
def app(make_app):
    app = make_app()
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(store_file):
    """Store holding the four ANIMALS/Nature records."""
    store_file.parent.mkdir(parents=True, exist_ok=True)
    write_records(store_file, ANIMALS)
    return store_file
