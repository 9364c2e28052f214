# src/domain/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


PAGE_SIZE = 5
MAX_QUERY_LENGTH = 255


@dataclass(frozen=True)
class Record:
    """
    A single searchable item from the static record set.
    """
    id: int
    title: str
    content: str


@dataclass(frozen=True)
class Query:
    """
    What the caller submitted. The text is kept exactly as typed, no trimming.
    """
    text: str
    case_sensitive: bool = False


class ValidationResult(Enum):
    VALID = None
    EMPTY = "Please enter a search query."
    TOO_LONG = f"Query is too long. Maximum {MAX_QUERY_LENGTH} characters allowed."

    @property
    def message(self) -> Optional[str]:
        return self.value

    @property
    def is_valid(self) -> bool:
        return self is ValidationResult.VALID


@dataclass(frozen=True)
class SearchError:
    """
    A submission rejected by the validator. Search and pagination never ran.
    """
    reason: ValidationResult

    @property
    def message(self) -> str:
        return self.reason.message


@dataclass(frozen=True)
class SearchSuccess:
    """
    A completed search. Zero matches is still a success ("no results").
    """
    query: Query
    matches: Tuple[Record, ...] = field(default=())

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def is_empty(self) -> bool:
        return not self.matches


SearchOutcome = Union[SearchSuccess, SearchError]


@dataclass(frozen=True)
class PageView:
    """
    Read-only window over a match set. Always derived, never stored on its own.
    """
    page_number: int
    page_size: int
    total_pages: int
    items: Tuple[Record, ...]

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def show_controls(self) -> bool:
        # Navigation is omitted entirely for a single page, not rendered disabled
        return self.total_pages > 1

    def __repr__(self) -> str:
        return (
            f"PageView(page={self.page_number}/{self.total_pages}, "
            f"items={[r.id for r in self.items]})"
        )
