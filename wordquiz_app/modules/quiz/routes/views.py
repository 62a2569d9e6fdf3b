# File: wordquiz_app/modules/quiz/routes/views.py
# Quiz page. What is rendered depends on the session state:
# mode_select, question, feedback or finished.

from flask import flash, redirect, render_template, url_for

from wordquiz_app.core.error_handlers import QuizUnavailableError, ValidationError
from wordquiz_app.modules.vocabulary.interface import get_all_vocabulary, get_topic_stats

from .. import quiz_bp as blueprint
from ..engine import ALL_TOPICS
from ..forms import AnswerForm, ChoiceForm, QuizActionForm, QuizStartForm
from ..schemas import MODE_LABELS
from ..services import QuizSessionManager


def _start_form():
    form = QuizStartForm()
    form.topic.choices = [(ALL_TOPICS, 'All topics')] + [
        (t['name'], f"{t['name']} ({t['count']})") for t in get_topic_stats()
    ]
    return form


@blueprint.route('/', methods=['GET'])
def quiz_page():
    manager = QuizSessionManager.load()
    return render_template(
        'quiz/index.html',
        quiz=manager.get_state(),
        mode_labels=MODE_LABELS,
        vocabulary_count=len(get_all_vocabulary()),
        start_form=_start_form(),
        answer_form=AnswerForm(),
        choice_form=ChoiceForm(),
        action_form=QuizActionForm(),
    )


def _to_page():
    return redirect(url_for('quiz.quiz_page'))


@blueprint.route('/start', methods=['POST'])
def start_quiz():
    form = _start_form()
    if form.validate_on_submit():
        try:
            topic = None if form.topic.data == ALL_TOPICS else form.topic.data
            QuizSessionManager.load().start(form.mode.data, topic)
        except (QuizUnavailableError, ValidationError) as e:
            flash(e.message, 'danger')
    else:
        flash('Please choose a quiz mode.', 'danger')
    return _to_page()


@blueprint.route('/answer', methods=['POST'])
def answer_question():
    manager = QuizSessionManager.load()
    question = manager.question or {}
    form = ChoiceForm() if question.get('inputType') == 'multiple-choice' else AnswerForm()
    if not form.validate_on_submit():
        flash('Please enter an answer.', 'danger')
        return _to_page()
    try:
        manager.answer(form.answer.data)
    except ValidationError as e:
        flash(e.message, 'danger')
    return _to_page()


@blueprint.route('/next', methods=['POST'])
def next_question():
    form = QuizActionForm()
    if form.validate_on_submit():
        try:
            QuizSessionManager.load().next()
        except (QuizUnavailableError, ValidationError) as e:
            flash(e.message, 'danger')
    return _to_page()


@blueprint.route('/finish', methods=['POST'])
def finish_quiz():
    form = QuizActionForm()
    if form.validate_on_submit():
        try:
            QuizSessionManager.load().finish()
        except ValidationError as e:
            flash(e.message, 'danger')
    return _to_page()


@blueprint.route('/reset', methods=['POST'])
def reset_quiz():
    form = QuizActionForm()
    if form.validate_on_submit():
        QuizSessionManager.load().reset()
    return _to_page()
