"""
Parser for the bulk-add text format.

One entry per line: ``word:meaning`` or ``word:meaning:phonetic``. When the
phonetic is omitted the word itself is used.
"""

from typing import List

from wordquiz_app.core.error_handlers import ValidationError


def parse_bulk_line(line: str) -> dict:
    parts = [p.strip() for p in line.split(':')]
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError(line)
    word, meaning = parts[0], parts[1]
    phonetic = parts[2] if len(parts) > 2 and parts[2] else word
    return {'word': word, 'meaning': meaning, 'phonetic': phonetic}


def parse_bulk_text(text: str) -> List[dict]:
    """Parse every non-blank line; a malformed line rejects the whole batch."""
    entries = []
    errors = {}
    for number, line in enumerate((text or '').splitlines(), start=1):
        if not line.strip():
            continue
        try:
            entries.append(parse_bulk_line(line))
        except ValueError:
            errors[str(number)] = f'Invalid format: {line.strip()}. Expected "word:meaning" or "word:meaning:phonetic"'

    if errors:
        raise ValidationError('Some lines could not be parsed', errors=errors)
    if not entries:
        raise ValidationError('Please enter at least one word')
    return entries
