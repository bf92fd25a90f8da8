"""Result type for fallible boundaries.

Detection and naming never fail; only the edges that touch the filesystem
(config loading) return a Result instead of raising.

Usage:
    result = load_config(path)
    if isinstance(result, Err):
        console.error(result.error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

__all__ = ["Ok", "Err", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding an error value."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
