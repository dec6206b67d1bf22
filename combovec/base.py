"""Shared sequence behaviour for the fixed-capacity containers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class SequenceMixin:
    """Comparison, formatting and conversion helpers for sized iterables.

    Subclasses provide ``__iter__`` and ``__len__``. Instances compare
    element by element and lexicographically, only with instances of the
    same class. They are mutable and therefore unhashable.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - overridden
        raise NotImplementedError

    def __len__(self) -> int:  # pragma: no cover - overridden
        raise NotImplementedError

    def is_empty(self) -> bool:
        """Return True when no elements are stored."""
        return len(self) == 0

    def to_list(self) -> list:
        """Return the stored elements as a new list."""
        return list(self)

    def join(self, sep: str) -> str:
        """Join the string form of every element with ``sep``."""
        return sep.join(str(item) for item in self)

    def _comparable(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return list(self) == list(other)  # type: ignore[call-overload]

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return list(self) < list(other)  # type: ignore[call-overload]

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return list(self) <= list(other)  # type: ignore[call-overload]

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return list(self) > list(other)  # type: ignore[call-overload]

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return list(self) >= list(other)  # type: ignore[call-overload]

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(repr(item) for item in self) + "]"