# src/infrastructure/record_store.py

from typing import Iterable, Optional, Tuple

from src.domain.interfaces import RecordStorePort
from src.domain.models import Record


DEFAULT_RECORDS: Tuple[Record, ...] = (
    Record(1, "Apple Pie Recipe", "A delicious apple pie with a flaky crust."),
    Record(2, "Banana Bread", "Moist banana bread with walnuts."),
    Record(3, "Cherry Tart", "Sweet and tangy cherry tart."),
    Record(4, "Apple Smoothie", "Refreshing apple and yogurt smoothie."),
    Record(5, "Orange Cake", "Zesty orange-flavored cake."),
    Record(6, "Blueberry Muffin", "Soft muffins with fresh blueberries."),
    Record(7, "Apple Crumble", "Warm apple crumble with oats."),
    Record(8, "Lemon Pie", "Creamy lemon pie with meringue."),
    Record(9, "Strawberry Jam", "Homemade strawberry jam."),
    Record(10, "Mango Sorbet", "Cool and tropical mango sorbet."),
    Record(11, "Tiramisu Classic", "Italian Tiramisu with espresso and mascarpone."),
)


class InMemoryRecordStore(RecordStorePort):
    """
    Static, in-memory record set.

    Records are fixed at construction time and exposed as a tuple,
    so callers can iterate but never mutate the backing data.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None):
        records = tuple(DEFAULT_RECORDS if records is None else records)

        seen = set()
        duplicates = []
        for record in records:
            if record.id in seen:
                duplicates.append(record.id)
            seen.add(record.id)
        if duplicates:
            raise ValueError(f"Duplicate record ids: {duplicates}")

        self._records = records
        print(f"[RecordStore] Loaded {len(self._records)} records.")

    def all_records(self) -> Tuple[Record, ...]:
        return self._records

    def count(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
