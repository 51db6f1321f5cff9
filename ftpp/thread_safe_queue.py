"""A double-ended queue safe to use from several threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """A deque whose operations each run under one lock."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._lock = threading.Lock()

    def push_back(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def push_front(self, item: T) -> None:
        with self._lock:
            self._items.appendleft(item)

    def pop_back(self) -> T:
        """Remove and return the last item; raises IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("Queue is empty. Cannot pop back.")
            return self._items.pop()

    def pop_front(self) -> T:
        """Remove and return the first item; raises IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("Queue is empty. Cannot pop front.")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)