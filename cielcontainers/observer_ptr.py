"""A non-owning handle to an object that compares by identity."""

from __future__ import annotations

from typing import Any

__all__ = ["ObserverPtr", "make_observer"]


class ObserverPtr:
    """Watches an object without owning it.

    Two observers are equal when they watch the very same object; an empty
    observer equals ``None``. Ordering and hashing follow object identity.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Any = None) -> None:
        self._target = target

    def release(self) -> Any:
        """Stop watching and return what was watched."""
        target, self._target = self._target, None
        return target

    def reset(self, target: Any = None) -> None:
        """Watch ``target`` instead, or nothing."""
        self._target = target

    def swap(self, other: "ObserverPtr") -> None:
        self._target, other._target = other._target, self._target

    def get(self) -> Any:
        return self._target

    def __bool__(self) -> bool:
        return self._target is not None

    def __eq__(self, other: object) -> bool:
        if other is None:
            return self._target is None
        if isinstance(other, ObserverPtr):
            return self._target is other._target
        return NotImplemented

    def __lt__(self, other: "ObserverPtr") -> bool:
        if not isinstance(other, ObserverPtr):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> int:
        return 0 if self._target is None else id(self._target)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


def make_observer(target: Any) -> ObserverPtr:
    """Return an observer watching ``target``."""
    return ObserverPtr(target)