# File: wordquiz_app/modules/quiz/routes/api.py
# JSON endpoints: one-off question generation, answer checking and the
# session-backed quiz flow.

from flask import jsonify, request

from .. import quiz_api_bp as blueprint
from ..services import QuizService, QuizSessionManager


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@blueprint.route('', methods=['GET'])
def get_question():
    """Generate one random question (?mode=, ?topic=)."""
    question = QuizService.generate_question(request.args.get('mode'), request.args.get('topic'))
    return jsonify(question.to_dict())


@blueprint.route('', methods=['POST'])
def check_answer():
    """Grade a typed answer with the loose comparison."""
    return jsonify(QuizService.check_answer(_json_body()))


@blueprint.route('/session', methods=['GET'])
def session_state():
    return jsonify(QuizSessionManager.load().get_state())


@blueprint.route('/session/start', methods=['POST'])
def session_start():
    data = _json_body()
    manager = QuizSessionManager.load().start(data.get('mode'), data.get('topic'))
    return jsonify(manager.get_state())


@blueprint.route('/session/answer', methods=['POST'])
def session_answer():
    manager = QuizSessionManager.load()
    result = manager.answer(_json_body().get('answer'))
    state = manager.get_state()
    state['result'] = result.to_dict()
    return jsonify(state)


@blueprint.route('/session/next', methods=['POST'])
def session_next():
    return jsonify(QuizSessionManager.load().next().get_state())


@blueprint.route('/session/finish', methods=['POST'])
def session_finish():
    manager = QuizSessionManager.load()
    manager.finish()
    return jsonify(manager.get_state())


@blueprint.route('/session/reset', methods=['POST'])
def session_reset():
    return jsonify(QuizSessionManager.load().reset().get_state())
