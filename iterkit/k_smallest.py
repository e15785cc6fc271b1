"""Select the k smallest elements of an iterable."""

from __future__ import annotations

import heapq
from typing import Iterable, List, TypeVar

T = TypeVar("T")

__all__ = ["k_smallest"]


def k_smallest(iterable: Iterable[T], k: int) -> List[T]:
    """Return the ``k`` smallest elements of ``iterable`` in ascending order.

    Memory use is bounded by ``k``. When ``k`` is zero nothing is consumed.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    return heapq.nsmallest(k, iterable)