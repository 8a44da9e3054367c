"""Zipping several iterables together, stopping at the shortest or the longest."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["zip_shortest", "zip_longest"]


def zip_shortest(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of corresponding elements until any iterable is exhausted.

    With no iterables, nothing is yielded.
    """
    return zip(*args)


def zip_longest(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of corresponding elements until every iterable is exhausted.

    Positions whose iterable has already run out hold ``None``.
    """
    return itertools.zip_longest(*args, fillvalue=None)