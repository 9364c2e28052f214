# src/application/matcher.py

from typing import List, Sequence

from src.domain.models import Query, Record


def match_records(records: Sequence[Record], query: Query) -> List[Record]:
    """
    Stable filter: keep records whose title or content contains the needle.

    Literal substring containment only: "pie apple" does not match
    "Apple Pie". Output keeps the input order; no scoring, no sorting.
    """
    needle = query.text if query.case_sensitive else query.text.lower()

    return [
        record
        for record in records
        if _contains(record.title, needle, query.case_sensitive)
        or _contains(record.content, needle, query.case_sensitive)
    ]


def _contains(field: str, needle: str, case_sensitive: bool) -> bool:
    haystack = field if case_sensitive else field.lower()
    return needle in haystack
