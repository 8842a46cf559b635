"""Growable vector with positional insertion, erasure and resizing."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sized
from typing import Any

from cielcontainers.vector_base import VectorBase

__all__ = ["Vector", "erase", "erase_if"]


class Vector(VectorBase):
    """A vector that also supports insertion and erasure at any position.

    Positions are integer indices in ``[0, len(self)]`` for insertion and
    ``[0, len(self))`` for single-element erasure. When an insertion does not
    fit, the capacity grows to twice its current value, or to exactly what is
    needed if that is larger.
    """

    __slots__ = ()

    def __str__(self) -> str:
        body = "".join(f"{item}, " for item in self._items)
        spare = self._capacity - len(self._items)
        return f"{type(self).__name__}: [ {body}__{spare}__ ]"

    # internal helpers

    def _check_insert_pos(self, pos: int) -> None:
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} is outside [0, {len(self._items)}]")

    def _make_room(self, count: int) -> None:
        new_size = len(self._items) + count
        if new_size > self._capacity:
            self._capacity = self._recommend_cap(new_size)

    # resizing

    def resize(self, count: int, value: Any = None) -> None:
        """Shrink to ``count`` or grow with copies of ``value``.

        Growing past the capacity sets the capacity to exactly ``count``.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        size = len(self._items)
        if count <= size:
            del self._items[count:]
            return
        self.reserve(count)
        self._items.extend(self._copies(count - size, value))

    # insertion

    def emplace(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return its index."""
        return self.insert(pos, value)

    def insert(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return its index."""
        self._check_insert_pos(pos)
        self._make_room(1)
        self._items.insert(pos, value)
        return pos

    def insert_fill(self, pos: int, count: int, value: Any) -> int:
        """Insert ``count`` copies of ``value`` before ``pos``; return ``pos``."""
        self._check_insert_pos(pos)
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if count == 0:
            return pos
        self._make_room(count)
        self._items[pos:pos] = self._copies(count, value)
        return pos

    def insert_range(self, pos: int, iterable: Iterable[Any]) -> int:
        """Insert the elements of ``iterable`` before ``pos``; return ``pos``.

        A sized input grows the capacity at once; an unsized one grows it as
        appending its elements one at a time would.
        """
        self._check_insert_pos(pos)
        if isinstance(iterable, Sized):
            new_items = list(iterable)
            if not new_items:
                return pos
            self._make_room(len(new_items))
        else:
            new_items = list(iterable)
            if not new_items:
                return pos
            self._grow_one_by_one(len(self._items) + len(new_items))
        self._items[pos:pos] = new_items
        return pos

    def append_range(self, iterable: Iterable[Any]) -> None:
        """Append all elements of ``iterable``."""
        self.insert_range(len(self._items), iterable)

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

    def swap(self, other: "Vector") -> None:
        """Exchange contents and capacities with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity


def erase(container: Vector, value: Any) -> int:
    """Remove every element equal to ``value``; return how many were removed."""
    return erase_if(container, lambda item: item == value)


def erase_if(container: Vector, pred: Callable[[Any], bool]) -> int:
    """Remove every element for which ``pred`` is true; return how many were removed."""
    kept = [item for item in container if not pred(item)]
    removed = len(container) - len(kept)
    if removed:
        container.assign(kept)
    return removed