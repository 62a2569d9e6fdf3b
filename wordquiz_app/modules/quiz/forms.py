# File: wordquiz_app/modules/quiz/forms.py

from flask_wtf import FlaskForm
from wtforms import HiddenField, SelectField, StringField, SubmitField
from wtforms.validators import DataRequired, Optional

from .engine import ALL_TOPICS
from .schemas import MIXED, MODE_LABELS, QUIZ_MODES


class QuizStartForm(FlaskForm):
    mode = SelectField('Mode', choices=[(m, MODE_LABELS[m]) for m in QUIZ_MODES], default=MIXED)
    topic = SelectField('Topic', choices=[(ALL_TOPICS, 'All topics')], default=ALL_TOPICS, validators=[Optional()])
    submit = SubmitField('Start quiz')


class AnswerForm(FlaskForm):
    answer = StringField('Your answer', validators=[DataRequired(message="Please enter an answer")])
    submit = SubmitField('Check')


class ChoiceForm(FlaskForm):
    """Multiple-choice answer; the chosen option arrives in ``answer``."""
    answer = HiddenField(validators=[DataRequired()])


class QuizActionForm(FlaskForm):
    """Bare form for next/finish/reset buttons (CSRF token only)."""
    submit = SubmitField()
