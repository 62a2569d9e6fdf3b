"""
Quiz question rules engine.
Pure logic, no file access, no Flask.
"""

import random
from typing import List, Optional

from wordquiz_app.core.error_handlers import QuizUnavailableError

from ..schemas import (
    MIXED,
    MIXED_TEXT,
    MULTIPLE_CHOICE,
    MULTIPLE_CHOICE_TYPES,
    PHONETIC_TO_MEANING,
    PHONETIC_TO_MEANING_TEXT,
    QUIZ_MODES,
    TEXT_INPUT,
    TEXT_TYPES,
    QuizQuestion,
)

ALL_TOPICS = 'all'


def resolve_mode(mode: Optional[str]) -> str:
    """Unknown or missing modes fall back to ``mixed``."""
    return mode if mode in QUIZ_MODES else MIXED


def filter_by_topic(records: List[dict], topic: Optional[str]) -> List[dict]:
    if not topic or topic == ALL_TOPICS:
        return list(records)
    return [r for r in records if r['topic'] == topic]


class QuizEngine:
    @staticmethod
    def pick_question_type(mode: str, rng=random) -> str:
        """Concrete question type for one question of ``mode``."""
        if mode == MIXED:
            return rng.choice(MULTIPLE_CHOICE_TYPES)
        if mode == MIXED_TEXT:
            return rng.choice(TEXT_TYPES)
        return mode

    @staticmethod
    def select_options(correct_answer: str, pool: List[str], num_choices: int = 4, rng=random) -> List[str]:
        """
        Sample ``num_choices - 1`` distinct wrong answers from ``pool`` and
        shuffle them together with the correct one.
        """
        distractors = []
        seen = {correct_answer}
        for value in pool:
            if value and value not in seen:
                seen.add(value)
                distractors.append(value)

        needed = min(max(num_choices - 1, 0), len(distractors))
        options = [correct_answer] + rng.sample(distractors, needed)
        rng.shuffle(options)
        return options

    @staticmethod
    def generate_question(
        records: List[dict],
        mode: Optional[str] = MIXED,
        topic: Optional[str] = None,
        rng=random,
        min_vocabulary: int = 4,
        num_choices: int = 4,
    ) -> QuizQuestion:
        """
        Build one question.

        The answer key comes from the topic-filtered records; distractors are
        drawn from the whole collection.
        """
        if not records:
            raise QuizUnavailableError('No vocabulary available for quiz')

        candidates = filter_by_topic(records, topic)
        if not candidates:
            raise QuizUnavailableError(f'No vocabulary items found in topic "{topic}"', topic=topic)

        if len(records) < min_vocabulary:
            raise QuizUnavailableError(f'At least {min_vocabulary} vocabulary items are required for quiz mode')

        question_type = QuizEngine.pick_question_type(resolve_mode(mode), rng)
        item = rng.choice(candidates)

        if question_type in (PHONETIC_TO_MEANING, PHONETIC_TO_MEANING_TEXT):
            question_text, correct_answer, answer_field = item['phonetic'], item['meaning'], 'meaning'
        else:
            question_text, correct_answer, answer_field = item['meaning'], item['phonetic'], 'phonetic'

        options = None
        if question_type in MULTIPLE_CHOICE_TYPES:
            pool = [r[answer_field] for r in records]
            options = QuizEngine.select_options(correct_answer, pool, num_choices, rng)

        return QuizQuestion(
            id=item['id'],
            question=question_text,
            correct_answer=correct_answer,
            type=question_type,
            word=item['word'],
            input_type=MULTIPLE_CHOICE if question_type in MULTIPLE_CHOICE_TYPES else TEXT_INPUT,
            options=options,
        )

    @staticmethod
    def is_text_type(question_type: str) -> bool:
        return question_type in TEXT_TYPES
