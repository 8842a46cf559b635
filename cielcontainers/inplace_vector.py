"""Fixed-capacity vector with positional insertion and erasure."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any

from cielcontainers.inplace_base import CapacityError, InplaceVectorBase

__all__ = ["InplaceVector", "erase", "erase_if"]


class InplaceVector(InplaceVectorBase):
    """An inplace vector that also supports insertion and erasure at any position.

    Positions are integer indices in ``[0, len(self)]`` for insertion and
    ``[0, len(self))`` for single-element erasure. Every insertion that would
    exceed the capacity raises :class:`CapacityError` and leaves the
    container unchanged.
    """

    __slots__ = ()

    # internal helpers

    def _check_insert_pos(self, pos: int) -> None:
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} is outside [0, {len(self._items)}]")

    def _check_room(self, count: int) -> None:
        if len(self._items) + count > self._capacity:
            raise CapacityError(
                f"inserting {count} elements into {len(self._items)} exceeds capacity {self._capacity}"
            )

    # insertion

    def emplace(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return its index."""
        return self.insert(pos, value)

    def insert(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return its index."""
        self._check_insert_pos(pos)
        self._check_room(1)
        self._items.insert(pos, value)
        return pos

    def insert_fill(self, pos: int, count: int, value: Any) -> int:
        """Insert ``count`` copies of ``value`` before ``pos``; return ``pos``."""
        self._check_insert_pos(pos)
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if count == 0:
            return pos
        self._check_room(count)
        self._items[pos:pos] = self._copies(count, value)
        return pos

    def insert_range(self, pos: int, iterable: Iterable[Any]) -> int:
        """Insert the elements of ``iterable`` before ``pos``; return ``pos``."""
        self._check_insert_pos(pos)
        room = self._capacity - len(self._items)
        new_items = list(islice(iterable, room + 1))
        self._check_room(len(new_items))
        self._items[pos:pos] = new_items
        return pos

    def append_range(self, iterable: Iterable[Any]) -> None:
        """Append all elements of ``iterable``; all or nothing."""
        self.insert_range(len(self._items), iterable)

    def try_append_range(self, iterable: Iterable[Any]) -> Iterator[Any]:
        """Append as many elements as fit and return an iterator over the rest."""
        it = iter(iterable)
        room = self._capacity - len(self._items)
        self._items.extend(islice(it, room))
        return it

    # erasure

    def erase(self, pos: int) -> int:
        """Remove the element at ``pos`` and return ``pos``."""
        if not 0 <= pos < len(self._items):
            raise IndexError(f"erase position {pos} is outside [0, {len(self._items)})")
        del self._items[pos]
        return pos

    def erase_range(self, first: int, last: int) -> int:
        """Remove the elements in ``[first, last)``.

        Returns ``first`` when something was removed and ``last`` otherwise.
        """
        if first < 0 or last > len(self._items):
            raise IndexError(f"erase range [{first}, {last}) is outside [0, {len(self._items)}]")
        if last <= first:
            return last
        del self._items[first:last]
        return first

    def swap(self, other: "InplaceVector") -> None:
        """Exchange contents with ``other``; each side must fit the other's elements."""
        if len(other._items) > self._capacity or len(self._items) > other._capacity:
            raise CapacityError("contents do not fit the other container's capacity")
        self._items, other._items = other._items, self._items


def erase(container: InplaceVector, value: Any) -> int:
    """Remove every element equal to ``value``; return how many were removed."""
    return erase_if(container, lambda item: item == value)


def erase_if(container: InplaceVector, pred: Callable[[Any], bool]) -> int:
    """Remove every element for which ``pred`` is true; return how many were removed."""
    kept = [item for item in container if not pred(item)]
    removed = len(container) - len(kept)
    if removed:
        container.assign(kept)
    return removed