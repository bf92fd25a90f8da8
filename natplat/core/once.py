"""Process-wide, compute-once memoization.

`functools.lru_cache` may evaluate the wrapped function more than once when
several threads miss the cache at the same time. Host identity must be
computed exactly once, so zero-argument resolvers are wrapped with `once`
instead: a double-checked lock around a single slot.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import update_wrapper
from typing import Generic, TypeVar

__all__ = ["Once", "once"]

T = TypeVar("T")


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


_UNSET = _Unset()


class Once(Generic[T]):
    """Callable wrapper computing `func()` once and returning it forever after.

    Concurrent first callers block on the lock until the single computation
    has finished, then all observe the same object.
    """

    def __init__(self, func: Callable[[], T]) -> None:
        self._func = func
        self._lock = threading.Lock()
        self._value: T | _Unset = _UNSET
        update_wrapper(self, func)

    def __call__(self) -> T:
        value = self._value
        if isinstance(value, _Unset):
            with self._lock:
                value = self._value
                if isinstance(value, _Unset):
                    value = self._func()
                    self._value = value
        return value

    def cache_clear(self) -> None:
        """Forget the computed value (tests only)."""
        with self._lock:
            self._value = _UNSET


def once(func: Callable[[], T]) -> Once[T]:
    """Decorator form of `Once`."""
    return Once(func)
