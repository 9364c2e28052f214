# src/application/session.py

from typing import Optional

from src.application.paginator import go_to_page
from src.application.search_service import TextSearchService
from src.domain.models import PageView, SearchError, SearchOutcome, SearchSuccess


class SearchSession:
    """
    Caller-owned search state: query text, case flag, last outcome, current page.

    The engine stays stateless; this object is the single writer of the
    "current query / current page" values and changes them only in
    response to explicit commands (submit, page change, toggle).
    """

    def __init__(self, service: TextSearchService, case_sensitive: bool = False):
        self._service = service
        self.query_text = ""
        self.case_sensitive = case_sensitive
        self.outcome: Optional[SearchOutcome] = None
        self.page_number = 1

    # ─── Commands ─────────────────────────────────────────────────────────────

    def set_query_text(self, text: str) -> None:
        """Editing the query invalidates whatever was shown for the old one."""
        self.query_text = text
        self._invalidate()

    def toggle_case_sensitivity(self) -> bool:
        # Results computed under the old flag are stale; no automatic re-run
        self.case_sensitive = not self.case_sensitive
        self._invalidate()
        return self.case_sensitive

    def submit(self) -> SearchOutcome:
        self.outcome = self._service.submit(self.query_text, self.case_sensitive)
        self.page_number = 1
        return self.outcome

    def go_to_page(self, page_number: int) -> bool:
        """Move to `page_number` if it exists. Returns True when the page changed."""
        if not isinstance(self.outcome, SearchSuccess):
            return False

        pages = self.page_view.total_pages
        new_page = go_to_page(self.page_number, page_number, pages)
        changed = new_page != self.page_number
        self.page_number = new_page
        return changed

    def next_page(self) -> bool:
        return self.go_to_page(self.page_number + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.page_number - 1)

    # ─── Derived views ────────────────────────────────────────────────────────

    @property
    def page_view(self) -> Optional[PageView]:
        if not isinstance(self.outcome, SearchSuccess):
            return None
        return self._service.page(self.outcome.matches, self.page_number)

    @property
    def status_message(self) -> Optional[str]:
        if self.outcome is None:
            return None
        return outcome_message(self.outcome)

    def _invalidate(self) -> None:
        self.outcome = None
        self.page_number = 1


def outcome_message(outcome: SearchOutcome) -> str:
    """One-line summary shown above the results (or instead of them)."""
    if isinstance(outcome, SearchError):
        return outcome.message
    if outcome.is_empty:
        return f'No results found for "{outcome.query.text}"'
    return f"Found {outcome.count} results"
