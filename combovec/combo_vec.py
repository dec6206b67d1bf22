"""A vector that fills a fixed-capacity part first and spills the rest."""

from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .base import SequenceMixin
from .re_arr import ReArr


class ComboVec(SequenceMixin):
    """A growable sequence made of a fixed-capacity stack part and a heap part.

    Elements fill the stack part first; once it is full, further elements
    go to the heap part.
    """

    __slots__ = ("_stack", "_heap", "_heap_capacity")

    def __init__(self, stack_capacity: int, items: Iterable[Any] = ()) -> None:
        self._stack = ReArr(stack_capacity)
        self._heap: list[Any] = []
        self._heap_capacity = 0
        self.extend(items)

    @classmethod
    def from_arr(cls, items: Sequence[Any]) -> ComboVec:
        """Create a vector whose stack part is exactly filled by ``items``."""
        items = list(items)
        return cls(len(items), items)

    @classmethod
    def from_arr_and_len(cls, slots: Sequence[Any]) -> ComboVec:
        """Create a vector from stack slots, where ``None`` marks an empty slot."""
        stack = ReArr.from_arr_and_len(slots)
        combo = cls(stack.capacity())
        combo._stack = stack
        return combo

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> ComboVec:
        """Create a vector with no stack part holding ``items`` on the heap."""
        combo = cls(0)
        combo._heap = list(items)
        combo._heap_capacity = len(combo._heap)
        return combo

    def _note_heap_growth(self) -> None:
        self._heap_capacity = max(self._heap_capacity, len(self._heap))

    def reserve(self, additional: int) -> None:
        """Make room on the heap for at least ``additional`` more elements."""
        additional = operator.index(additional)
        if additional < 0:
            raise ValueError(f"additional must not be negative, got {additional}")
        self._heap_capacity = max(self._heap_capacity, len(self._heap) + additional)

    def push(self, value: Any) -> None:
        """Append ``value``, on the stack part while it has room."""
        if len(self) < self._stack.capacity():
            self._stack.push(value)
        else:
            self._heap.append(value)
            self._note_heap_growth()

    def pop(self) -> Any:
        """Remove and return the last element, or ``None`` when empty."""
        if self._heap:
            return self._heap.pop()
        return self._stack.pop()

    def get(self, index: int) -> Any:
        """Return the element at ``index``, or ``None`` if there is none."""
        index = operator.index(index)
        capacity = self._stack.capacity()
        if index < capacity:
            return self._stack.get(index)
        heap_index = index - capacity
        return self._heap[heap_index] if heap_index < len(self._heap) else None

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(f"index out of range for vector of length {len(self)}")
        return index

    def __getitem__(self, index: int) -> Any:
        index = self._position(index)
        capacity = self._stack.capacity()
        return self._stack[index] if index < capacity else self._heap[index - capacity]

    def __setitem__(self, index: int, value: Any) -> None:
        index = self._position(index)
        capacity = self._stack.capacity()
        if index < capacity:
            self._stack[index] = value
        else:
            self._heap[index - capacity] = value

    def spilled(self) -> bool:
        """Return True when any element lives on the heap part."""
        return bool(self._heap)

    def stack_len(self) -> int:
        """Return how many elements are in the stack part."""
        return len(self._stack)

    def heap_len(self) -> int:
        """Return how many elements are in the heap part."""
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._stack) + len(self._heap)

    def stack_capacity(self) -> int:
        """Return how many elements the stack part can hold."""
        return self._stack.capacity()

    def heap_capacity(self) -> int:
        """Return how many elements the heap part holds without growing."""
        return self._heap_capacity

    def capacity(self) -> int:
        """Return how many elements fit without growing the heap part."""
        return self.stack_capacity() + self.heap_capacity()

    def truncate(self, length: int) -> None:
        """Shorten to ``length`` elements; longer lengths leave it unchanged."""
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        capacity = self._stack.capacity()
        if length > len(self):
            return
        if length >= capacity:
            del self._heap[length - capacity:]
        else:
            self._stack.truncate(length)
            self._heap.clear()

    def clear(self) -> None:
        """Remove every element."""
        self._stack.clear()
        self._heap.clear()

    def first(self) -> Any:
        """Return the first element, or ``None`` when empty."""
        if self._stack.capacity() == 0:
            return self._heap[0] if self._heap else None
        return self._stack.first()

    def last(self) -> Any:
        """Return the last element, or ``None`` when empty."""
        if self._heap:
            return self._heap[-1]
        return self._stack.last()

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain(self._stack, self._heap)

    def extend(self, items: Iterable[Any]) -> None:
        """Push every item in turn."""
        for item in items:
            self.push(item)

    def _resize_heap(self, heap_len: int, make: Callable[[], Any]) -> None:
        if heap_len <= len(self._heap):
            del self._heap[heap_len:]
        else:
            self._heap.extend(make() for _ in range(heap_len - len(self._heap)))
            self._note_heap_growth()

    def resize(self, new_len: int, value: Any) -> None:
        """Grow with ``value`` or shrink so the length is ``new_len``."""
        new_len = operator.index(new_len)
        if new_len < 0:
            raise ValueError(f"new length must not be negative, got {new_len}")
        capacity = self._stack.capacity()
        if new_len >= capacity:
            if len(self) < capacity:
                self._stack.resize(capacity, value)
            self._resize_heap(new_len - capacity, lambda: value)
        else:
            self._stack.resize(new_len, value)
            self._heap.clear()

    def resize_with(self, new_len: int, factory: Callable[[], Any]) -> None:
        """Grow with results of ``factory()`` or shrink so the length is ``new_len``."""
        new_len = operator.index(new_len)
        if new_len < 0:
            raise ValueError(f"new length must not be negative, got {new_len}")
        capacity = self._stack.capacity()
        if new_len >= capacity:
            for _ in range(len(self), capacity):
                self._stack.push(factory())
            self._resize_heap(new_len - capacity, factory)
        else:
            self._stack.resize_with(new_len, factory)
            self._heap.clear()

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting later ones left."""
        index = operator.index(index)
        capacity = self._stack.capacity()
        if index >= capacity:
            heap_index = index - capacity
            if heap_index >= len(self._heap):
                raise IndexError(f"index out of range for vector of length {len(self)}")
            return self._heap.pop(heap_index)
        removed = self._stack.remove(index)
        if self._heap:
            self._stack.push(self._heap.pop(0))
        return removed

    def swap_remove(self, index: int) -> Any:
        """Remove the element at ``index`` and put the last element in its place."""
        index = operator.index(index)
        capacity = self._stack.capacity()
        if index >= capacity:
            heap_index = index - capacity
            if heap_index >= len(self._heap):
                raise IndexError(f"index out of range for vector of length {len(self)}")
            removed = self._heap[heap_index]
            last = self._heap.pop()
            if heap_index < len(self._heap):
                self._heap[heap_index] = last
            return removed
        if len(self) <= capacity:
            return self._stack.swap_remove(index)
        if index < 0:
            raise IndexError(f"index out of range for vector of length {len(self)}")
        removed = self._stack[index]
        self._stack[index] = self._heap.pop()
        return removed

    def copy(self) -> ComboVec:
        """Return a shallow copy with the same stack capacity."""
        combo = type(self)(self._stack.capacity())
        combo._stack = self._stack.copy()
        combo._heap = list(self._heap)
        combo._heap_capacity = len(combo._heap)
        return combo

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(stack_capacity={self._stack.capacity()}, "
            f"items={list(self)!r})"
        )