"""Snapshot-based save and restore of object state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ftpp.data_buffer import DataBuffer


class Snapshot:
    """Serialized state: values written in order and read back in the same order."""

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = DataBuffer(data)

    def write(self, fmt: str, *args: Any) -> Snapshot:
        """Append values packed with ``fmt``; returns the snapshot."""
        self._buffer.write(fmt, *args)
        return self

    def read(self, fmt: str) -> Any:
        """Consume values packed with ``fmt`` from the front."""
        return self._buffer.read(fmt)

    def copy(self) -> Snapshot:
        """Return an independent snapshot holding the same bytes."""
        return Snapshot(bytes(self._buffer))

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)


class Memento(ABC):
    """Base for objects that can save their state to and load it from a Snapshot."""

    def save(self) -> Snapshot:
        snapshot = Snapshot()
        self._save_to_snapshot(snapshot)
        return snapshot

    def load(self, snapshot: Snapshot) -> None:
        """Restore state from a copy of ``snapshot``, leaving it reusable."""
        self._load_from_snapshot(snapshot.copy())

    @abstractmethod
    def _save_to_snapshot(self, snapshot: Snapshot) -> None:
        """Write this object's state into ``snapshot``."""

    @abstractmethod
    def _load_from_snapshot(self, snapshot: Snapshot) -> None:
        """Read this object's state from ``snapshot``."""