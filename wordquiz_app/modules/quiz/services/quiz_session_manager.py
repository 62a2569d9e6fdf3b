# File: wordquiz_app/modules/quiz/services/quiz_session_manager.py
# Quiz session state machine, persisted in the signed Flask session cookie.
#
#   mode_select --start--> question --answer--> feedback --next--> question
#        ^                     |                   |
#        |                     +------finish-------+--> finished
#        +------------------------reset----------------------+

import random

from flask import current_app, session

from wordquiz_app.core.error_handlers import ValidationError
from wordquiz_app.core.signals import answer_checked, quiz_finished

from ..engine import resolve_mode
from ..schemas import MULTIPLE_CHOICE, QuizQuestion, QuizResult, QuizSummary
from .quiz_service import QuizService

MODE_SELECT = 'mode_select'
QUESTION = 'question'
FEEDBACK = 'feedback'
FINISHED = 'finished'

# Only the most recent results are kept for review; the cookie is small
MAX_REVIEW_RESULTS = 20


class QuizSessionManager:
    """
    Manages the state of one quiz run.
    """

    SESSION_KEY = 'quiz_session'

    def __init__(self, state=MODE_SELECT, mode=None, topic=None, question=None, results=None,
                 correct=0, answered=0, total_questions=0, selected_answer=''):
        self.state = state
        self.mode = mode
        self.topic = topic
        self.question = question
        self.results = results or []
        self.correct = correct
        self.answered = answered
        self.total_questions = total_questions
        self.selected_answer = selected_answer

    def to_dict(self):
        return {
            'state': self.state,
            'mode': self.mode,
            'topic': self.topic,
            'question': self.question,
            'results': self.results,
            'correct': self.correct,
            'answered': self.answered,
            'totalQuestions': self.total_questions,
            'selectedAnswer': self.selected_answer,
        }

    @classmethod
    def from_dict(cls, data):
        state = data.get('state', MODE_SELECT)
        if state not in (MODE_SELECT, QUESTION, FEEDBACK, FINISHED):
            state = MODE_SELECT
        return cls(
            state=state,
            mode=data.get('mode'),
            topic=data.get('topic'),
            question=data.get('question'),
            results=data.get('results'),
            correct=data.get('correct', 0),
            answered=data.get('answered', 0),
            total_questions=data.get('totalQuestions', 0),
            selected_answer=data.get('selectedAnswer', ''),
        )

    @classmethod
    def load(cls):
        data = session.get(cls.SESSION_KEY)
        if data:
            return cls.from_dict(data)
        return cls()

    def save(self):
        session[self.SESSION_KEY] = self.to_dict()

    def _require(self, *states, action):
        if self.state not in states:
            raise ValidationError(f'Cannot {action} while quiz is in state "{self.state}"')

    def _load_question(self, rng=random):
        question = QuizService.generate_question(self.mode, self.topic, rng=rng)
        self.question = question.to_dict()
        self.selected_answer = ''
        self.total_questions += 1

    # ------------------------------------------------------------------ #
    #  Transitions                                                        #
    # ------------------------------------------------------------------ #

    def start(self, mode, topic=None, rng=random):
        """Begin a new run with ``mode``; any previous run is discarded."""
        self._require(MODE_SELECT, FINISHED, action='start')
        self.mode = resolve_mode(mode)
        self.topic = topic or None
        self.results = []
        self.correct = 0
        self.answered = 0
        self.total_questions = 0
        self._load_question(rng)
        self.state = QUESTION
        self.save()
        current_app.logger.info(f"[Quiz] Started {self.mode} quiz (topic={self.topic or 'all'})")
        return self

    def answer(self, value):
        """Grade ``value`` against the current question and show feedback."""
        self._require(QUESTION, action='answer')
        value = (value or '').strip() if isinstance(value, str) else ''
        if not value:
            raise ValidationError('Answer is required')

        question = QuizQuestion.from_dict(self.question)
        if question.input_type == MULTIPLE_CHOICE:
            is_correct = value == question.correct_answer
            answer_checked.send(
                current_app._get_current_object(),
                question_type=question.type,
                is_correct=is_correct,
            )
        else:
            is_correct = QuizService.check_answer({
                'userAnswer': value,
                'correctAnswer': question.correct_answer,
                'questionType': question.type,
            })['isCorrect']

        result = QuizResult(
            question_id=question.id,
            question=question.question,
            selected_answer=value,
            correct_answer=question.correct_answer,
            is_correct=is_correct,
            word=question.word,
        )
        self.results = (self.results + [result.to_dict()])[-MAX_REVIEW_RESULTS:]
        self.answered += 1
        if is_correct:
            self.correct += 1
        self.selected_answer = value
        self.state = FEEDBACK
        self.save()
        return result

    def next(self, rng=random):
        self._require(FEEDBACK, action='load the next question')
        self._load_question(rng)
        self.state = QUESTION
        self.save()
        return self

    def finish(self):
        self._require(QUESTION, FEEDBACK, action='finish')
        self.state = FINISHED
        self.save()
        summary = self.summary()
        quiz_finished.send(
            current_app._get_current_object(),
            mode=self.mode,
            correct=summary.correct,
            total=summary.total,
            percentage=summary.percentage,
        )
        return summary

    def reset(self):
        """Drop the run and go back to mode selection."""
        session.pop(self.SESSION_KEY, None)
        return type(self)()

    # ------------------------------------------------------------------ #

    def summary(self) -> QuizSummary:
        return QuizSummary(correct=self.correct, total=self.answered, results=list(self.results))

    def get_state(self):
        data = self.to_dict()
        data['summary'] = self.summary().to_dict()
        return data
