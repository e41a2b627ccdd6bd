from __future__ import annotations
from typing import Iterable, Optional, TypeVar
import logging

from .container import BoundedContainer
from .errors import EmptyContainer

T = TypeVar("T")

logger = logging.getLogger(__name__)

class BoundedStack(BoundedContainer[T]):
    """LIFO container. push() and pop() act on the top (end of the list)."""
    label = "Stack"

    def push(self, items: Iterable[T]) -> None:
        # all-or-nothing, same as BoundedQueue.enqueue
        self._insert(items)

    def pop(self) -> T:
        if not self._items:
            logger.debug("%s: pop on empty stack", self.name)
            raise EmptyContainer("Empty Stack")
        return self._items.pop()

    def peek(self) -> Optional[T]:
        return self._items[-1] if self._items else None
