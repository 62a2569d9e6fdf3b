# File: wordquiz_app/modules/quiz/__init__.py
from flask import Blueprint

# Quiz page (mode select -> question -> feedback -> summary)
quiz_bp = Blueprint('quiz', __name__)

# JSON API: question generation, answer checking, session state
quiz_api_bp = Blueprint('quiz_api', __name__)
