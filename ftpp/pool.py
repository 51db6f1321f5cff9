"""A fixed pool of object slots handed out through owning handles."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class PooledObject(Generic[T]):
    """Handle to an object living in a pool slot; gives the slot back on release."""

    def __init__(self, pool: Pool[T], slot: int, value: T) -> None:
        self._pool = pool
        self._slot = slot
        self._released = False
        self.value = value

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Return the slot to the pool; releasing twice does nothing."""
        if not self._released:
            self._pool.release(self)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.__dict__["value"], name)

    def __enter__(self) -> PooledObject[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class Pool(Generic[T]):
    """Holds a number of free slots; each acquire builds an object in one."""

    def __init__(self, factory: Callable[..., T]) -> None:
        self._factory = factory
        self._free: list[int] = []
        self._slot_count = 0

    def resize(self, count: int) -> None:
        """Add ``count`` new free slots to the pool."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._free.extend(range(self._slot_count, self._slot_count + count))
        self._slot_count += count

    def acquire(self, *args: Any, **kwargs: Any) -> PooledObject[T]:
        """Take a free slot and construct an object in it.

        Raises RuntimeError when no slot is free. If construction fails the
        slot is returned and the error propagates.
        """
        if not self._free:
            raise RuntimeError("Pool is empty")
        slot = self._free.pop()
        try:
            value = self._factory(*args, **kwargs)
        except BaseException:
            self._free.append(slot)
            raise
        return PooledObject(self, slot, value)

    def release(self, obj: PooledObject[T]) -> None:
        """Give the slot held by ``obj`` back to the pool."""
        if obj._pool is not self:
            raise ValueError("object does not belong to this pool")
        if obj._released:
            raise ValueError("object already released")
        obj._released = True
        self._free.append(obj._slot)

    def __len__(self) -> int:
        return len(self._free)