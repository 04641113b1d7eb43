"""
In-memory record stores: dishes and orders as ordered lists (insertion order).
One store per resource per app instance; nothing is persisted.
"""
import itertools
import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from grubdash.errors import NotFound

R = TypeVar("R", bound=BaseModel)


def parse_id(value) -> int | None:
    """Numeric form of a route or payload id ("7" -> 7). None if it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


class RecordStore(ABC, Generic[R]):
    resource: str

    @abstractmethod
    def list(self) -> list[R]:
        """All records, oldest first."""

    @abstractmethod
    def append(self, **fields) -> R:
        """Store a new record under a freshly assigned id and return it."""

    @abstractmethod
    def find_by_id(self, record_id) -> R | None:
        """Return the record whose id equals record_id numerically, or None."""

    @abstractmethod
    def remove(self, record_id) -> R:
        """Remove and return the record. Raises NotFound if absent."""


class InMemoryStore(RecordStore[R]):
    def __init__(self, model: type[R], resource: str, first_id: int = 1):
        self._model = model
        self.resource = resource
        self._records: list[R] = []
        self._ids = itertools.count(first_id)
        self._lock = threading.Lock()

    def list(self) -> list[R]:
        with self._lock:
            return list(self._records)

    def append(self, **fields) -> R:
        with self._lock:
            record = self._model(id=next(self._ids), **fields)
            self._records.append(record)
            return record

    def find_by_id(self, record_id) -> R | None:
        wanted = parse_id(record_id)
        if wanted is None:
            return None
        with self._lock:
            for record in self._records:
                if record.id == wanted:
                    return record
        return None

    def remove(self, record_id) -> R:
        wanted = parse_id(record_id)
        with self._lock:
            for index, record in enumerate(self._records):
                if wanted is not None and record.id == wanted:
                    return self._records.pop(index)
        raise NotFound(record_id, self.resource)

    def __len__(self) -> int:
        return len(self._records)
