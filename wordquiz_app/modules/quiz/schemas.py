from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PHONETIC_TO_MEANING = 'phonetic-to-meaning'
MEANING_TO_PHONETIC = 'meaning-to-phonetic'
PHONETIC_TO_MEANING_TEXT = 'phonetic-to-meaning-text'
MEANING_TO_PHONETIC_TEXT = 'meaning-to-phonetic-text'

MULTIPLE_CHOICE_TYPES = (PHONETIC_TO_MEANING, MEANING_TO_PHONETIC)
TEXT_TYPES = (PHONETIC_TO_MEANING_TEXT, MEANING_TO_PHONETIC_TEXT)
QUESTION_TYPES = MULTIPLE_CHOICE_TYPES + TEXT_TYPES

MIXED = 'mixed'
MIXED_TEXT = 'mixed-text'
QUIZ_MODES = QUESTION_TYPES + (MIXED, MIXED_TEXT)

MULTIPLE_CHOICE = 'multiple-choice'
TEXT_INPUT = 'text-input'

MODE_LABELS = {
    PHONETIC_TO_MEANING: 'Phonetic → Meaning',
    MEANING_TO_PHONETIC: 'Meaning → Phonetic',
    MIXED: 'Mixed',
    PHONETIC_TO_MEANING_TEXT: 'Phonetic → Meaning (type it)',
    MEANING_TO_PHONETIC_TEXT: 'Meaning → Phonetic (type it)',
    MIXED_TEXT: 'Mixed (type it)',
}


@dataclass
class QuizQuestion:
    id: int
    question: str
    correct_answer: str
    type: str
    word: str
    input_type: str
    options: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'question': self.question,
            'correctAnswer': self.correct_answer,
            'type': self.type,
            'word': self.word,
            'inputType': self.input_type,
        }
        if self.options is not None:
            data['options'] = list(self.options)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuizQuestion':
        return cls(
            id=data['id'],
            question=data['question'],
            correct_answer=data['correctAnswer'],
            type=data['type'],
            word=data['word'],
            input_type=data['inputType'],
            options=data.get('options'),
        )


@dataclass
class QuizResult:
    question_id: int
    question: str
    selected_answer: str
    correct_answer: str
    is_correct: bool
    word: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'questionId': self.question_id,
            'question': self.question,
            'selectedAnswer': self.selected_answer,
            'correctAnswer': self.correct_answer,
            'isCorrect': self.is_correct,
            'word': self.word,
        }


@dataclass
class QuizSummary:
    correct: int = 0
    total: int = 0
    results: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def percentage(self) -> int:
        if not self.total:
            return 0
        # Halves round up: 5/8 is 63%
        return (self.correct * 200 + self.total) // (self.total * 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'correct': self.correct,
            'total': self.total,
            'percentage': self.percentage,
            'results': self.results,
        }
