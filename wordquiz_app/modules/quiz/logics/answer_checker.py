"""
Pure logic for grading free-text quiz answers.
No file access, no Flask.

Answers typed by hand rarely match the stored text exactly, so comparison goes
through a loose normalizer that ignores case, punctuation, Latin diacritics and
extra whitespace.
"""

import re
import unicodedata

_WHITESPACE = re.compile(r'\s+')

# Latin combining marks only; kana voicing marks (U+3099/U+309A) are kept
_COMBINING_START, _COMBINING_END = 0x0300, 0x036F


def _strip_punctuation(text: str) -> str:
    return ''.join(ch for ch in text if not unicodedata.category(ch).startswith('P'))


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize('NFD', text)
    kept = ''.join(ch for ch in decomposed if not _COMBINING_START <= ord(ch) <= _COMBINING_END)
    return unicodedata.normalize('NFC', kept)


def normalize_text(text: str) -> str:
    """Case-fold, drop punctuation and diacritics, collapse whitespace."""
    if not text:
        return ''
    value = text.lower().replace('đ', 'd')
    value = _strip_punctuation(value)
    value = _strip_diacritics(value)
    return _WHITESPACE.sub(' ', value).strip()


def is_answer_correct(user_answer: str, correct_answer: str, is_vietnamese: bool = False) -> bool:
    """
    Grade ``user_answer`` against ``correct_answer``.

    Non-Vietnamese answers (phonetics) must match after normalization.
    Vietnamese answers are also accepted when one contains the other
    ("quả táo" vs "táo") or when every word of the correct answer appears
    in some word of the user's answer.
    """
    if not user_answer or not correct_answer:
        return False

    user = normalize_text(user_answer)
    correct = normalize_text(correct_answer)
    if not user or not correct:
        return False

    if user == correct:
        return True
    if not is_vietnamese:
        return False

    if correct in user or user in correct:
        return True

    user_words = user.split(' ')
    return all(
        any(word in user_word or user_word in word for user_word in user_words)
        for word in correct.split(' ')
    )
