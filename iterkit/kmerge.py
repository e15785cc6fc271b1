"""Merge any number of sorted iterables into one sorted stream."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

__all__ = ["KMergeBy", "kmerge", "kmerge_by"]

_MISSING = object()


class _HeadTail(Generic[T]):
    """A non-empty iterator split into its current first element and the rest."""

    __slots__ = ("head", "tail")

    def __init__(self, head: T, tail: Iterator[T]) -> None:
        self.head = head
        self.tail = tail

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> Optional["_HeadTail[T]"]:
        tail = iter(iterable)
        head = next(tail, _MISSING)
        if head is _MISSING:
            return None
        return cls(head, tail)

    def length_hint(self) -> int:
        return operator.length_hint(self.tail) + 1


def _sift_down(heap: list, index: int, less_than: Callable) -> None:
    """Restore the min-heap property below ``index``."""
    pos = index
    child = 2 * pos + 1
    size = len(heap)
    while child + 1 < size:
        if less_than(heap[child + 1], heap[child]):
            child += 1
        if not less_than(heap[child], heap[pos]):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == size and less_than(heap[child], heap[pos]):
        heap[pos], heap[child] = heap[child], heap[pos]


def _heapify(data: list, less_than: Callable) -> None:
    for i in reversed(range(len(data) // 2)):
        _sift_down(data, i, less_than)


class KMergeBy(Generic[T]):
    """Iterator merging several iterables according to ``less_than(a, b)``.

    If every input is sorted with respect to ``less_than`` the output is
    sorted too.
    """

    def __init__(
        self, iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]
    ) -> None:
        self._less_than = less_than
        heads = (_HeadTail.from_iterable(it) for it in iterables)
        self._heap: List[_HeadTail[T]] = [h for h in heads if h is not None]
        _heapify(self._heap, self._compare)

    def _compare(self, a: _HeadTail[T], b: _HeadTail[T]) -> bool:
        return self._less_than(a.head, b.head)

    def __iter__(self) -> "KMergeBy[T]":
        return self

    def __next__(self) -> T:
        heap = self._heap
        if not heap:
            raise StopIteration
        top = heap[0]
        result = top.head
        following = next(top.tail, _MISSING)
        if following is _MISSING:
            last = heap.pop()
            if heap:
                heap[0] = last
        else:
            top.head = following
        _sift_down(heap, 0, self._compare)
        return result

    def __length_hint__(self) -> int:
        return sum(entry.length_hint() for entry in self._heap)


def kmerge_by(
    iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]
) -> KMergeBy[T]:
    """Merge ``iterables`` using ``less_than`` as the ordering predicate."""
    return KMergeBy(iterables, less_than)


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge ``iterables`` in ascending order."""
    return KMergeBy(iterables, operator.lt)