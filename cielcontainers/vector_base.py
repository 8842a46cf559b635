"""Growable sequence that tracks its capacity and grows geometrically."""

from __future__ import annotations

import copy as _copy
import sys
from collections.abc import Iterable, Iterator, Sequence, Sized
from itertools import repeat
from typing import Any

__all__ = ["LengthError", "VectorBase"]


class LengthError(ValueError):
    """Raised when a requested size or capacity exceeds ``max_size()``."""


class VectorBase:
    """A sequence with an explicit capacity.

    Appending to a full vector grows the capacity to twice its current value,
    or to exactly what is needed if that is larger. The capacity never grows
    beyond :meth:`max_size`.
    """

    __slots__ = ("_capacity", "_items")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._capacity = 0
        self._items: list[Any] = []
        if isinstance(iterable, Sized):
            count = len(iterable)
            self._check_count(count)
            self._items = list(iterable)
            self._capacity = len(self._items)
        else:
            for value in iterable:
                self.push_back(value)

    @classmethod
    def filled(cls, count: int, value: Any = None) -> "VectorBase":
        """Create a vector holding ``count`` copies of ``value``."""
        result = cls()
        result._check_count(count)
        result._items = result._copies(count, value)
        result._capacity = count
        return result

    # internal helpers

    def _check_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if count > self.max_size():
            raise LengthError("requested size is beyond max_size")

    @staticmethod
    def _copies(count: int, value: Any) -> list[Any]:
        return [_copy.copy(v) for v in repeat(value, count)]

    def _recommend_cap(self, new_size: int) -> int:
        ms = self.max_size()
        if new_size > ms:
            raise LengthError("expanding size is beyond max_size")
        if self._capacity >= ms // 2:
            return ms
        return max(self._capacity * 2, new_size)

    def _grow_one_by_one(self, size: int) -> None:
        """Grow the capacity as repeated single appends up to ``size`` would."""
        while self._capacity < size:
            self._capacity = self._recommend_cap(self._capacity + 1)

    # sequence protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, pos: int | slice) -> Any:
        return self._items[pos]

    def __setitem__(self, pos: int, value: Any) -> None:
        if isinstance(pos, slice):
            raise TypeError("slice assignment would change the size; use assign or insert")
        self._items[pos] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VectorBase):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def copy(self) -> "VectorBase":
        """Return a shallow copy whose capacity equals its size."""
        return type(self)(self._items)

    # element access

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``; negative positions are out of range."""
        if not 0 <= pos < len(self._items):
            raise IndexError("pos is not within the range of the vector")
        return self._items[pos]

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    # capacity

    def empty(self) -> bool:
        return not self._items

    def capacity(self) -> int:
        return self._capacity

    def max_size(self) -> int:
        return sys.maxsize

    def reserve(self, new_cap: int) -> None:
        """Make room for at least ``new_cap`` elements."""
        if new_cap <= self._capacity:
            return
        if new_cap > self.max_size():
            raise LengthError("reserve capacity beyond max_size")
        self._capacity = new_cap

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = len(self._items)

    # modifiers

    def assign(self, iterable: Iterable[Any]) -> None:
        """Replace the contents with the elements of ``iterable``."""
        if isinstance(iterable, Sized):
            count = len(iterable)
            self._check_count(count)
            self._items = list(iterable)
            self._capacity = max(self._capacity, count)
        else:
            new_items = list(iterable)
            self._grow_one_by_one(len(new_items))
            self._items = new_items

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        self._check_count(count)
        self._items = self._copies(count, value)
        self._capacity = max(self._capacity, count)

    def push_back(self, value: Any) -> None:
        size = len(self._items)
        if size == self._capacity:
            self._capacity = self._recommend_cap(size + 1)
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop_back on an empty vector")
        return self._items.pop()

    def clear(self) -> None:
        """Remove all elements; the capacity is kept."""
        self._items.clear()