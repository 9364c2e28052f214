# src/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import Sequence

from .models import Record


class RecordStorePort(ABC):
    """
    Port for the searchable record source.
    Read-only: records are loaded once and never change afterwards.
    """

    @abstractmethod
    def all_records(self) -> Sequence[Record]:
        """Return every record, in the store's fixed order."""
        ...

    @abstractmethod
    def count(self) -> int: ...
