# File: wordquiz_app/modules/quiz/services/quiz_service.py
# Glue between the quiz engine, the vocabulary store and the app config.

import random
from typing import Any, Dict, Optional

from flask import current_app

from wordquiz_app.core.error_handlers import ValidationError
from wordquiz_app.core.signals import answer_checked
from wordquiz_app.modules.vocabulary.interface import get_all_vocabulary

from ..engine import QuizEngine
from ..logics.answer_checker import is_answer_correct
from ..schemas import QuizQuestion


class QuizService:
    @staticmethod
    def generate_question(mode: Optional[str] = None, topic: Optional[str] = None, rng=random) -> QuizQuestion:
        records = get_all_vocabulary()
        question = QuizEngine.generate_question(
            records,
            mode=mode,
            topic=topic,
            rng=rng,
            min_vocabulary=current_app.config.get('QUIZ_MIN_VOCABULARY', 4),
            num_choices=current_app.config.get('QUIZ_CHOICES', 4),
        )
        current_app.logger.debug(f"[Quiz] Generated {question.type} question for #{question.id}")
        return question

    @staticmethod
    def check_answer(data: Dict[str, Any]) -> Dict[str, Any]:
        """Grade a typed answer. Text question types use the loose comparison."""
        data = data or {}
        user_answer = data.get('userAnswer')
        correct_answer = data.get('correctAnswer')
        question_type = data.get('questionType')

        if not user_answer or not correct_answer or not question_type:
            raise ValidationError('Missing required fields')
        if not all(isinstance(v, str) for v in (user_answer, correct_answer, question_type)):
            raise ValidationError('userAnswer, correctAnswer and questionType must be strings')

        is_vietnamese = QuizEngine.is_text_type(question_type)
        is_correct = is_answer_correct(user_answer, correct_answer, is_vietnamese)

        answer_checked.send(
            current_app._get_current_object(),
            question_type=question_type,
            is_correct=is_correct,
        )
        return {
            'isCorrect': is_correct,
            'userAnswer': user_answer,
            'correctAnswer': correct_answer,
            'isVietnamese': is_vietnamese,
        }
