"""A base class giving each subclass one explicitly created instance."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

S = TypeVar("S", bound="Singleton")


class Singleton:
    """Subclasses are created once through ``instantiate`` and fetched with ``instance``."""

    _instances: ClassVar[dict[type, Any]] = {}

    @classmethod
    def instance(cls: type[S]) -> S:
        try:
            return Singleton._instances[cls]
        except KeyError:
            raise RuntimeError("Instance not yet created") from None

    @classmethod
    def instantiate(cls, *args: Any, **kwargs: Any) -> None:
        """Create the instance; raises RuntimeError if it already exists."""
        if cls in Singleton._instances:
            raise RuntimeError("Instance already created")
        Singleton._instances[cls] = cls(*args, **kwargs)