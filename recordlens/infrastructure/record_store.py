"""
In-memory record store for recordlens.

The store is the only data source the query engine reads from. Its contents
are fixed at construction: there is no insert/update/delete API, so any
number of readers can share one instance without locking.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator, Tuple, overload

from recordlens.domain.models import Employee
from recordlens.domain.seed import seed_employees
from recordlens.exceptions import DuplicateRecordError
from recordlens.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Read-only ordered collection of employees.

    Records keep the order they were supplied in. Identifiers must be unique.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[Employee] = ()) -> None:
        snapshot = tuple(records)
        seen: set[int] = set()
        for record in snapshot:
            if record.id in seen:
                raise DuplicateRecordError(record.id)
            seen.add(record.id)
        self._records: Tuple[Employee, ...] = snapshot

    @classmethod
    def seeded(cls) -> "RecordStore":
        """Build a store holding the startup seed set."""
        store = cls(seed_employees())
        log.debug("Seeded record store", extra={"records": len(store)})
        return store

    @property
    def records(self) -> Tuple[Employee, ...]:
        return self._records

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> Employee: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Employee, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return f"RecordStore(records={len(self._records)})"


@lru_cache(maxsize=1)
def get_default_store() -> RecordStore:
    """
    Retrieve the process-wide seeded store, built on first use.
    """
    return RecordStore.seeded()


__all__ = ["RecordStore", "get_default_store"]
