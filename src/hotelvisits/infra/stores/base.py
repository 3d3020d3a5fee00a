"""Shared machinery for the in-memory record stores.

Each store owns one list of records and one ``threading.Lock``. Every public
operation holds that lock for the whole read or mutation and hands back
copies, so callers never see the live list.

Identifier assignment:

  next id = (largest id currently stored) + 1, or 1 if the store is empty.

The id is computed under the same lock that appends the record, so two
concurrent creates can never receive the same id.

Nothing inside a locked section does I/O, logs, or calls another store.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, Generic, Iterable, Protocol, TypeVar

from hotelvisits.infra.time import Clock, utc_now


class _HasId(Protocol):
    id: int


R = TypeVar("R", bound=_HasId)


class RecordNotFoundError(LookupError):
    """Raised when an update targets an identifier the store does not hold."""

    def __init__(self, entity: str, record_id: int) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with ID {record_id} not found")


class RecordStore(Generic[R]):
    """Lock-guarded list of records with max-plus-one integer ids."""

    entity = "Record"

    def __init__(self, records: Iterable[R] = (), *, clock: Clock = utc_now) -> None:
        self._lock = threading.Lock()
        self._records: list[R] = [replace(r) for r in records]
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list_all(self) -> list[R]:
        """Snapshot of every record, in insertion order."""
        with self._lock:
            return [replace(r) for r in self._records]

    def get(self, record_id: int) -> R | None:
        with self._lock:
            found = self._find(record_id)
            return replace(found) if found is not None else None

    def delete(self, record_id: int) -> bool:
        """Remove the record if present. Returns whether anything was removed."""
        with self._lock:
            found = self._find(record_id)
            if found is None:
                return False
            self._records.remove(found)
            return True

    # ── Helpers for subclasses ───────────────────────────────────────────────

    def _insert(self, build: Callable[[int], R]) -> R:
        """Assign the next id, build the record with it and append it."""
        with self._lock:
            next_id = max((r.id for r in self._records), default=0) + 1
            record = build(next_id)
            self._records.append(record)
            return replace(record)

    def _modify(self, record_id: int, apply: Callable[[R], None]) -> R:
        """Mutate the stored record in place; raise if it does not exist."""
        with self._lock:
            found = self._find(record_id)
            if found is None:
                raise RecordNotFoundError(self.entity, record_id)
            apply(found)
            return replace(found)

    def _select(self, predicate: Callable[[R], bool]) -> list[R]:
        """Copies of the records matching *predicate*, in insertion order."""
        with self._lock:
            return [replace(r) for r in self._records if predicate(r)]

    def _find(self, record_id: int) -> R | None:
        # Caller must hold self._lock
        for record in self._records:
            if record.id == record_id:
                return record
        return None
