from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Optional, TypeVar
import logging

from .container import BoundedContainer
from .errors import EmptyContainer

T = TypeVar("T")

logger = logging.getLogger(__name__)

class BoundedQueue(BoundedContainer[T]):
    """
    FIFO container. enqueue() appends at the back, dequeue() takes from the front.
    Backed by a deque so dequeue() does not shift the remaining items.
    """
    label = "Queue"

    def _new_storage(self) -> Deque[T]:
        return deque()

    def enqueue(self, items: Iterable[T]) -> None:
        """
        Append a batch to the back in order. Either the whole batch goes in
        or CapacityExceeded is raised and nothing changes.
        """
        self._insert(items)

    def dequeue(self) -> T:
        if not self._items:
            logger.debug("%s: dequeue on empty queue", self.name)
            raise EmptyContainer("Empty queue.")
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        return self._items[0] if self._items else None
