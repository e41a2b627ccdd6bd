from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, MutableSequence, Optional, TextIO, TypeVar
import logging
import sys

from .errors import CapacityExceeded, ItemNotFound

T = TypeVar("T")

logger = logging.getLogger(__name__)

class BoundedContainer(Generic[T]):
    """
    Shared body of BoundedQueue and BoundedStack.

    Items are kept oldest first in self._items. Subclasses decide which end
    removal and peek act on; everything else (capacity check, search,
    rendering) is the same for both.
    maxsize == 0 means unbounded, as with queue.Queue.
    """
    label = "Container"

    def __init__(self, name: str = "", maxsize: int = 0):
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")
        self.name = name or self.label.lower()
        self._maxsize = maxsize
        self._items: MutableSequence[T] = self._new_storage()

    def _new_storage(self) -> MutableSequence[T]:
        return []

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def _insert(self, items: Iterable[T]) -> None:
        batch = list(items)
        if self._maxsize and len(self._items) + len(batch) > self._maxsize:
            logger.debug(
                "%s: rejected %d item(s), size=%d maxsize=%d",
                self.name, len(batch), len(self._items), self._maxsize,
            )
            raise CapacityExceeded(f"{self.label} has reached max capacity")
        self._items.extend(batch)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.size() == 0

    def is_full(self) -> bool:
        return bool(self._maxsize) and self.size() >= self._maxsize

    def clear(self) -> None:
        self._items = self._new_storage()

    def contains(self, item: object) -> bool:
        for existing in self._items:
            if existing == item:
                return True
        return False

    def search(self, item: object) -> int:
        """
        1-based position of the first match, counted from the oldest element
        (front of a queue, bottom of a stack).
        """
        for pos, existing in enumerate(self._items, start=1):
            if existing == item:
                return pos
        raise ItemNotFound(f"Item not found in {self.label.lower()}.")

    def to_list(self) -> List[T]:
        return list(self._items)

    def describe(self) -> str:
        return ", ".join(str(i) for i in self._items)

    def show(self, file: Optional[TextIO] = None) -> None:
        print(f"{self.label} content: {self.describe()}", file=file or sys.stdout)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, maxsize={self._maxsize}, "
            f"items={self.to_list()!r})"
        )
