# src/application/search_service.py

from typing import List, Sequence

from src.application.matcher import match_records
from src.application.paginator import paginate
from src.application.validator import validate_query
from src.domain.interfaces import RecordStorePort
from src.domain.models import (
    PAGE_SIZE,
    PageView,
    Query,
    Record,
    SearchError,
    SearchOutcome,
    SearchSuccess,
    ValidationResult,
)


class TextSearchService:
    """
    Core use case: literal text search over a static record set.

    Stateless: every call is a pure function of its arguments and the
    (read-only) store. Current query / current page belong to the caller,
    see SearchSession.

    Flow:
    - validate() first; invalid text never reaches the matcher
    - search() → full ordered match set
    - page()   → one window of that set
    """

    def __init__(self, record_store: RecordStorePort, page_size: int = PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f"Page size must be positive, got {page_size}.")
        self._record_store = record_store
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def validate(self, text: str) -> ValidationResult:
        return validate_query(text)

    def search(self, text: str, case_sensitive: bool = False) -> List[Record]:
        """Run the matcher. Callers must have checked validate() first."""
        result = validate_query(text)
        if not result.is_valid:
            raise ValueError(result.message)

        return match_records(
            self._record_store.all_records(),
            Query(text=text, case_sensitive=case_sensitive),
        )

    def page(self, matches: Sequence[Record], page_number: int = 1) -> PageView:
        return paginate(matches, page_number, self._page_size)

    def submit(self, text: str, case_sensitive: bool = False) -> SearchOutcome:
        """
        Validate + search in one step. User input errors come back as
        SearchError values, never as exceptions.
        """
        result = validate_query(text)
        if not result.is_valid:
            return SearchError(reason=result)

        query = Query(text=text, case_sensitive=case_sensitive)
        matches = match_records(self._record_store.all_records(), query)
        print(
            f"[SearchService] {len(matches)} match(es) "
            f"(case_sensitive={case_sensitive})."
        )
        return SearchSuccess(query=query, matches=tuple(matches))
