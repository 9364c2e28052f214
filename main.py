# main.py

from src.infrastructure.record_store import InMemoryRecordStore
from src.application.search_service import TextSearchService
from src.application.session import SearchSession
from src.domain.models import PAGE_SIZE, SearchError
from src.interface.cli import (
    console,
    display_welcome_banner,
    prompt_for_query,
    prompt_for_action,
    display_status,
    display_no_results,
    display_page,
    display_case_mode,
    display_error,
)


CASE_SENSITIVE_BY_DEFAULT = False


def main() -> None:
    # ── 1. Wire the engine ───────────────────────────────────────────────────
    record_store = InMemoryRecordStore()
    search_service = TextSearchService(record_store, page_size=PAGE_SIZE)
    session = SearchSession(search_service, case_sensitive=CASE_SENSITIVE_BY_DEFAULT)

    display_welcome_banner(record_store.count())

    # ── 2. Interactive search loop ───────────────────────────────────────────
    try:
        while True:
            session.set_query_text(prompt_for_query(session.case_sensitive))
            session.submit()
            if not _browse_results(session):
                break
    except (KeyboardInterrupt, EOFError):
        pass

    console.print("\n[dim]Bye.[/dim]")


def _browse_results(session: SearchSession) -> bool:
    """
    Show the current outcome and handle page / case commands.
    Returns False when the user asked to quit.
    """
    while True:
        if isinstance(session.outcome, SearchError):
            display_error(session.status_message)
            return True

        view = session.page_view
        if view.total_pages == 0:
            display_no_results(session.status_message)
        else:
            display_status(session.status_message)
            display_page(view)

        action = prompt_for_action(view)

        if action == "q":
            return False
        if action == "s":
            return True
        if action == "c":
            display_case_mode(session.toggle_case_sensitivity())
            # Toggling drops the old results; re-run the same text under the new mode
            session.submit()
        elif action == "n":
            session.next_page()
        elif action == "p":
            session.previous_page()
        else:
            session.go_to_page(int(action))


if __name__ == "__main__":
    main()
