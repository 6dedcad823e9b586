"""Ordered, appendable, sortable collection of student records."""

from typing import Callable, Iterable, Iterator, List, Optional

from core.record import Record
from utils.error_handler import NullRecord
from utils.logger import get_logger

logger = get_logger()


class Roster:
    """Holds the Records of one run in insertion order until sorted by name."""

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self._records: List[Record] = []
        for record in records or ():
            self.append(record)

    def append(self, record: Optional[Record]) -> None:
        """Adds ``record`` at the end.

        Raises:
            NullRecord: If ``record`` is None.
        """
        if record is None:
            raise NullRecord()
        self._records.append(record)

    def sort_by_name(self) -> None:
        """Orders records by name using plain string comparison.

        Records with equal names keep their relative order. The sorted list is
        built first and then swapped in, so no caller sees a half-sorted roster.
        """
        if len(self._records) < 2:
            logger.debug(f"Roster has {len(self._records)} record(s); nothing to sort.")
            return
        self._records = sorted(self._records, key=lambda record: record.name)
        logger.debug(f"Sorted {len(self._records)} records by name.")

    def count(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def names(self) -> List[str]:
        return [record.name for record in self._records]

    def for_each(self, action: Callable[[Record], None]) -> None:
        """Calls ``action`` on every record in current order."""
        for record in self:
            action(record)

    def clear(self) -> None:
        """Releases every record at once."""
        self._records = []

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __repr__(self) -> str:
        return f"Roster(count={len(self._records)})"
