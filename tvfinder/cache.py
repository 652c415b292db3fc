"""A bounded, de-duplicating ring buffer used to back preview caches."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

DEFAULT_CAPACITY = 20


class RingSet(Generic[T]):
    """A ring buffer that refuses duplicate keys.

    Pushing a key that is already present does nothing. Pushing a new key
    into a full buffer evicts the oldest key first.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._ring: deque[T] = deque()
        self._known: set[T] = set()

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> T | None:
        """Add ``item`` at the back; return the evicted key, if any."""
        if item in self._known:
            logger.debug("Key already in ring buffer: %r", item)
            return None
        popped = None
        if len(self._ring) >= self._capacity:
            popped = self._pop()
        self._ring.append(item)
        self._known.add(item)
        return popped

    def _pop(self) -> T | None:
        if not self._ring:
            return None
        item = self._ring.popleft()
        logger.debug("Removing key from ring buffer: %r", item)
        self._known.discard(item)
        return item

    def __contains__(self, item: object) -> bool:
        return item in self._known

    def __len__(self) -> int:
        return len(self._ring)

    def back_to_front(self) -> Iterator[T]:
        """Yield the keys from the most recent to the oldest."""
        yield from reversed(list(self._ring))

    def __repr__(self) -> str:
        return f"RingSet(capacity={self._capacity}, items={list(self._ring)!r})"