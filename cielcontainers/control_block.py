"""Reference-counting bookkeeping shared by strong and weak owners of an object."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

__all__ = ["ControlBlock"]


class ControlBlock:
    """Tracks strong and weak references to one managed object.

    The strong count starts at one. When it drops to zero the object is
    disposed: the deleter, if any, is called with it, and the block gives up
    its reference to the object. The weak count starts at one as well; that
    one stands for "the strong count is not zero". When the weak count drops
    to zero the block itself is finished and any further release is an error.
    """

    __slots__ = ("_obj", "_deleter", "_shared", "_weak", "_lock")

    def __init__(self, obj: Any = None, deleter: Callable[[Any], Any] | None = None) -> None:
        self._obj = obj
        self._deleter = deleter
        self._shared = 1
        self._weak = 1
        self._lock = threading.Lock()

    def use_count(self) -> int:
        """Return the number of strong owners."""
        return self._shared

    def shared_add_ref(self, count: int = 1) -> None:
        """Add ``count`` strong references; the object must still be alive."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        with self._lock:
            if self._shared == 0:
                raise RuntimeError("cannot add a strong reference to an expired object")
            self._shared += count

    def weak_add_ref(self) -> None:
        """Add one weak reference; the block must not be finished."""
        with self._lock:
            if self._weak == 0:
                raise RuntimeError("cannot add a weak reference to a destroyed control block")
            self._weak += 1

    def shared_release(self) -> None:
        """Drop one strong reference, disposing of the object at zero."""
        with self._lock:
            if self._shared == 0:
                raise RuntimeError("strong count is already zero")
            self._shared -= 1
            expired = self._shared == 0
        if expired:
            self._dispose()
            self.weak_release()

    def weak_release(self) -> None:
        """Drop one weak reference, finishing the block at zero."""
        with self._lock:
            if self._weak == 0:
                raise RuntimeError("weak count is already zero")
            self._weak -= 1
            finished = self._weak == 0
        if finished:
            self._deleter = None

    def increment_if_not_zero(self) -> bool:
        """Add a strong reference unless the object has expired; report success."""
        with self._lock:
            if self._shared == 0:
                return False
            self._shared += 1
            return True

    def get_deleter(self) -> Callable[[Any], Any] | None:
        """Return the deleter given at construction, or None."""
        return self._deleter

    def managed(self) -> Any:
        """Return the managed object, or None once it has been disposed."""
        return self._obj

    def _dispose(self) -> None:
        obj, self._obj = self._obj, None
        if self._deleter is not None:
            self._deleter(obj)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(use_count={self._shared}, weak_count={self._weak})"