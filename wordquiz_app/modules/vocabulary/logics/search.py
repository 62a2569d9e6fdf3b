"""
Pure search/filter helpers over vocabulary records.
No Flask, no file access.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

SEARCH_FIELDS = ('word', 'meaning', 'phonetic', 'topic')


def matches_search(record: dict, term: str, fields: Iterable[str] = SEARCH_FIELDS) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``fields``."""
    needle = term.lower()
    return any(needle in str(record.get(field, '')).lower() for field in fields)


def filter_vocabulary(records: List[dict], search: Optional[str]) -> List[dict]:
    """Return records matching ``search``; all records when it is blank."""
    if not search or not search.strip():
        return list(records)
    term = search.strip()
    return [r for r in records if matches_search(r, term)]


@dataclass
class Page:
    """One page of the list view."""
    items: List[dict]
    page: int
    pages: int
    total: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


def paginate(records: List[dict], page: int, per_page: int) -> Page:
    """Slice ``records`` for one page of the list view."""
    per_page = max(per_page, 1)
    total = len(records)
    pages = max((total + per_page - 1) // per_page, 1)
    page = min(max(page, 1), pages)
    start = (page - 1) * per_page
    return Page(items=records[start:start + per_page], page=page, pages=pages, total=total)
