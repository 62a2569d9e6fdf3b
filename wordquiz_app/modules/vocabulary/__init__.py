# File: wordquiz_app/modules/vocabulary/__init__.py
from flask import Blueprint

# HTML pages (list, add/edit form, bulk add, topic management)
vocabulary_bp = Blueprint('vocabulary', __name__)

# JSON API for vocabulary and topics, mounted under /api
vocabulary_api_bp = Blueprint('vocabulary_api', __name__)
