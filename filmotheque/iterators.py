"""Lazy iteration helpers: sorting by a comparator, star-mapping, prefix taking and de-duplication."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from functools import cmp_to_key
from itertools import groupby
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")

__all__ = [
    "sorted_by",
    "starmap",
    "takewhile",
    "unique_everseen",
    "unique_justseen",
]


def sorted_by(
    iterable: Iterable[T], less: Callable[[T, T], bool] | None = None
) -> list[T]:
    """Return the elements of *iterable* ordered by a strict "less than" predicate.

    The elements themselves are kept, not copies. Without *less*, the natural
    ``<`` ordering is used. Equal elements keep their original relative order.
    """
    is_less = operator.lt if less is None else less

    def compare(a: T, b: T) -> int:
        if is_less(a, b):
            return -1
        if is_less(b, a):
            return 1
        return 0

    return sorted(iterable, key=cmp_to_key(compare))


def starmap(func: Callable[..., R], iterable: Iterable[Iterable[Any]]) -> Iterator[R]:
    """Yield ``func(*args)`` for each group of arguments in *iterable*."""
    for args in iterable:
        yield func(*args)


def takewhile(
    iterable: Iterable[T], predicate: Callable[[T], Any] | None = None
) -> Iterator[T]:
    """Yield leading elements of *iterable* while *predicate* holds.

    Without *predicate*, elements are tested for truthiness. Iteration stops
    at the first element that fails; nothing after it is examined.
    """
    test = bool if predicate is None else predicate
    for element in iterable:
        if not test(element):
            return
        yield element


def unique_everseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each distinct element of *iterable* the first time it appears."""
    seen_hashable: set[Any] = set()
    seen_other: list[Any] = []
    for element in iterable:
        if isinstance(element, Hashable):
            try:
                if element in seen_hashable:
                    continue
                seen_hashable.add(element)
                yield element
                continue
            except TypeError:
                pass
        if element in seen_other:
            continue
        seen_other.append(element)
        yield element


def unique_justseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield the first element of each run of equal consecutive elements."""
    for _, group in groupby(iterable):
        yield next(group)