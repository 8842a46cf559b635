"""Fixed-capacity sequence whose size may vary but never exceeds its capacity."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice, repeat
from typing import Any


class CapacityError(MemoryError):
    """Raised when an operation would grow a container past its fixed capacity."""


class InplaceVectorBase:
    """A sequence with a fixed capacity chosen at construction.

    Any operation that would make the size exceed the capacity raises
    :class:`CapacityError` and leaves the container unchanged.
    """

    __slots__ = ("_capacity", "_items")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, capacity: int, iterable: Iterable[Any] = ()) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError(f"capacity must be a non-negative integer, got {capacity!r}")
        self._capacity = capacity
        self._items: list[Any] = self._checked_list(iterable)

    @classmethod
    def filled(cls, capacity: int, count: int, value: Any = None) -> "InplaceVectorBase":
        """Create a container holding ``count`` copies of ``value``."""
        result = cls(capacity)
        result.assign_fill(count, value)
        return result

    # internal helpers

    def _checked_list(self, iterable: Iterable[Any]) -> list[Any]:
        # Take at most one element more than fits, so oversized (even endless)
        # inputs are rejected without being consumed completely.
        items = list(islice(iterable, self._capacity + 1))
        if len(items) > self._capacity:
            raise CapacityError(f"more than {self._capacity} elements do not fit")
        return items

    def _check_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if count > self._capacity:
            raise CapacityError(f"{count} elements exceed capacity {self._capacity}")

    @staticmethod
    def _copies(count: int, value: Any) -> list[Any]:
        return [_copy.copy(v) for v in repeat(value, count)]

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
        if isinstance(other, InplaceVectorBase):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capacity}, {self._items!r})"

    def copy(self) -> "InplaceVectorBase":
        """Return a shallow copy with the same capacity."""
        return type(self)(self._capacity, self._items)

    # element access

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``; negative positions are out of range."""
        if not 0 <= pos < len(self._items):
            raise IndexError("pos is not within the range of the inplace vector")
        return self._items[pos]

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty inplace vector")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty inplace vector")
        return self._items[-1]

    # capacity

    def empty(self) -> bool:
        return not self._items

    def capacity(self) -> int:
        return self._capacity

    def max_size(self) -> int:
        return self._capacity

    def reserve(self, new_cap: int) -> None:
        """Check that ``new_cap`` elements would fit; storage never changes."""
        if new_cap > self._capacity:
            raise CapacityError(f"cannot reserve {new_cap}, capacity is {self._capacity}")

    def shrink_to_fit(self) -> None:
        """Do nothing: the capacity is fixed."""

    # modifiers

    def resize(self, count: int, value: Any = None) -> None:
        """Shrink to ``count`` or grow with copies of ``value``."""
        self._check_count(count)
        size = len(self._items)
        if count <= size:
            del self._items[count:]
        else:
            self._items.extend(self._copies(count - size, value))

    def assign(self, iterable: Iterable[Any]) -> None:
        """Replace the contents with the elements of ``iterable``."""
        self._items = self._checked_list(iterable)

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        self._check_count(count)
        self._items = self._copies(count, value)

    def push_back(self, value: Any) -> None:
        if len(self._items) == self._capacity:
            raise CapacityError(f"inplace vector is full at capacity {self._capacity}")
        self._items.append(value)

    def try_push_back(self, value: Any) -> bool:
        """Append ``value`` if there is room; return whether it was appended."""
        if len(self._items) == self._capacity:
            return False
        self._items.append(value)
        return True

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop_back on an empty inplace vector")
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()