"""A fixed-capacity array holding a variable number of elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .base import SequenceMixin


def _check_capacity(capacity: int) -> int:
    capacity = operator.index(capacity)
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class ReArr(SequenceMixin):
    """A container with a fixed capacity and a variable number of elements.

    Elements occupy the first ``len(self)`` slots; pushing beyond the
    capacity raises ``IndexError``.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []
        self.extend(items)

    @classmethod
    def from_arr(cls, items: Sequence[Any]) -> ReArr:
        """Create a full array whose capacity equals the number of items."""
        items = list(items)
        return cls(len(items), items)

    @classmethod
    def from_arr_and_len(cls, slots: Sequence[Any]) -> ReArr:
        """Create an array from slots, where ``None`` marks an empty slot.

        Occupied slots must come first; once an empty slot is seen, every
        later slot must be empty as well.
        """
        slots = list(slots)
        length = next((pos for pos, slot in enumerate(slots) if slot is None), len(slots))
        if any(slot is not None for slot in slots[length:]):
            raise ValueError("occupied slots must not follow an empty slot")
        return cls(len(slots), slots[:length])

    def push(self, value: Any) -> None:
        """Append ``value``; raise ``IndexError`` when the array is full."""
        if len(self._items) >= self._capacity:
            raise IndexError(f"cannot push onto a full array of capacity {self._capacity}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element, or ``None`` when empty."""
        return self._items.pop() if self._items else None

    def get(self, index: int) -> Any:
        """Return the element at ``index``, or ``None`` if there is none."""
        index = operator.index(index)
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += len(self._items)
        if not 0 <= index < len(self._items):
            raise IndexError(f"index out of range for array of length {len(self._items)}")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        """Return how many elements the array can hold."""
        return self._capacity

    def truncate(self, length: int) -> None:
        """Shorten to ``length`` elements; longer lengths leave it unchanged.

        Raises ``IndexError`` if ``length`` exceeds the capacity.
        """
        length = operator.index(length)
        if not 0 <= length <= self._capacity:
            raise IndexError(f"length {length} is outside capacity {self._capacity}")
        del self._items[length:]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def first(self) -> Any:
        """Return the first element, or ``None`` when empty."""
        return self._items[0] if self._items else None

    def last(self) -> Any:
        """Return the last element, or ``None`` when empty."""
        return self._items[-1] if self._items else None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def extend(self, items: Iterable[Any]) -> None:
        """Push every item in turn; raise ``IndexError`` once the array is full."""
        for item in items:
            self.push(item)

    def _check_new_len(self, new_len: int) -> int:
        new_len = operator.index(new_len)
        if new_len < 0:
            raise ValueError(f"new length must not be negative, got {new_len}")
        if new_len > self._capacity:
            raise ValueError("new length cannot be greater than the internal array length")
        return new_len

    def resize(self, new_len: int, value: Any) -> None:
        """Grow with copies of ``value`` or shrink so the length is ``new_len``."""
        new_len = self._check_new_len(new_len)
        if new_len > len(self._items):
            self._items.extend([value] * (new_len - len(self._items)))
        else:
            del self._items[new_len:]

    def resize_with(self, new_len: int, factory: Callable[[], Any]) -> None:
        """Grow with results of ``factory()`` or shrink so the length is ``new_len``."""
        new_len = self._check_new_len(new_len)
        if new_len > len(self._items):
            self._items.extend(factory() for _ in range(new_len - len(self._items)))
        else:
            del self._items[new_len:]

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting later ones left."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"index out of range for array of length {len(self._items)}")
        return self._items.pop(index)

    def swap_remove(self, index: int) -> Any:
        """Remove the element at ``index`` and put the last element in its place.

        Raises ``IndexError`` if ``index`` is out of range or names the last
        element.
        """
        index = operator.index(index)
        if not 0 <= index < len(self._items) - 1:
            raise IndexError(f"cannot swap-remove index {index} from array of length {len(self._items)}")
        removed = self._items[index]
        self._items[index] = self._items.pop()
        return removed

    def copy(self) -> ReArr:
        """Return a shallow copy with the same capacity."""
        return type(self)(self._capacity, self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"