# tests/test_search_service.py

import pytest
from unittest.mock import MagicMock

from src.application.search_service import TextSearchService
from src.domain.models import Record, SearchError, SearchSuccess, ValidationResult
from src.infrastructure.record_store import InMemoryRecordStore


@pytest.fixture
def service() -> TextSearchService:
    return TextSearchService(InMemoryRecordStore())


def _make_mock_store(records):
    store = MagicMock()
    store.all_records.return_value = records
    store.count.return_value = len(records)
    return store


def test_submit_empty_query_returns_error(service):
    outcome = service.submit("   ")
    assert isinstance(outcome, SearchError)
    assert outcome.reason is ValidationResult.EMPTY
    assert outcome.message == "Please enter a search query."


def test_submit_too_long_query_returns_error(service):
    outcome = service.submit("a" * 256)
    assert isinstance(outcome, SearchError)
    assert outcome.reason is ValidationResult.TOO_LONG


def test_submit_max_length_query_succeeds_with_no_matches(service):
    outcome = service.submit("a" * 255)
    assert isinstance(outcome, SearchSuccess)
    assert outcome.is_empty
    assert outcome.count == 0


def test_invalid_query_never_reaches_store():
    store = _make_mock_store([])
    service = TextSearchService(store)

    service.submit("")
    service.submit("x" * 300)

    store.all_records.assert_not_called()


def test_search_rejects_unvalidated_text(service):
    with pytest.raises(ValueError, match="Please enter a search query"):
        service.search("")


def test_search_apple_returns_three(service):
    results = service.search("apple")
    assert [r.id for r in results] == [1, 4, 7]
    assert service.page(results, 1).show_controls is False


def test_submit_keeps_query_as_typed(service):
    outcome = service.submit("Tiramisu", case_sensitive=True)
    assert outcome.query.text == "Tiramisu"
    assert outcome.query.case_sensitive is True
    assert [r.title for r in outcome.matches] == ["Tiramisu Classic"]


def test_e_scenario_pages(service):
    outcome = service.submit("e")
    assert outcome.count == 11

    assert service.page(outcome.matches, 1).total_pages == 3
    assert len(service.page(outcome.matches, 1).items) == 5
    assert len(service.page(outcome.matches, 3).items) == 1


def test_service_uses_store_records():
    records = [Record(1, "Foo", "bar"), Record(2, "Baz", "foo fighters")]
    service = TextSearchService(_make_mock_store(records), page_size=1)

    outcome = service.submit("foo")

    assert [r.id for r in outcome.matches] == [1, 2]
    assert service.page(outcome.matches, 2).items == (records[1],)


def test_invalid_page_size_raises():
    with pytest.raises(ValueError):
        TextSearchService(_make_mock_store([]), page_size=0)
