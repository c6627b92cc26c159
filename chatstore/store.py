"""Entity store: the backing list for one entity type.

Rows keep insertion order. Callers that find-then-mutate (find an index,
then replace or remove it) must hold ``lock`` for the whole sequence;
repositories do this for every mutating operation.
"""

import threading
from typing import Callable, Generic, Iterator, List, TypeVar

RowT = TypeVar("RowT")


class EntityStore(Generic[RowT]):
    """Insertion-ordered rows guarded by a re-entrant lock."""

    def __init__(self, name: str):
        self.name = name
        self.lock = threading.RLock()
        self._rows: List[RowT] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RowT]:
        # Iterate over a snapshot so concurrent appends don't disturb callers.
        with self.lock:
            return iter(list(self._rows))

    def append(self, row: RowT) -> None:
        with self.lock:
            self._rows.append(row)

    def extend(self, rows: List[RowT]) -> None:
        with self.lock:
            self._rows.extend(rows)

    def index_of(self, predicate: Callable[[RowT], bool]) -> int:
        """Index of the first row matching *predicate*, or -1."""
        with self.lock:
            for index, row in enumerate(self._rows):
                if predicate(row):
                    return index
            return -1

    def get(self, index: int) -> RowT:
        with self.lock:
            return self._rows[index]

    def replace(self, index: int, row: RowT) -> None:
        with self.lock:
            self._rows[index] = row

    def pop(self, index: int) -> RowT:
        with self.lock:
            return self._rows.pop(index)

    def remove_where(self, predicate: Callable[[RowT], bool]) -> List[RowT]:
        """Remove every row matching *predicate*; return them in store order."""
        with self.lock:
            removed = [row for row in self._rows if predicate(row)]
            if removed:
                self._rows = [row for row in self._rows if not predicate(row)]
            return removed
