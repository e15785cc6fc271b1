"""Insert a separator between the elements of an iterable."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["intersperse", "intersperse_with"]

_MISSING = object()


def intersperse_with(iterable: Iterable[T], make_element: Callable[[], T]) -> Iterator[T]:
    """Yield the elements of ``iterable`` with ``make_element()`` between each pair.

    The separator is only made once the element that follows it is known to
    exist, so ``make_element`` is called exactly ``n - 1`` times for ``n``
    elements. Once exhausted the iterator stays exhausted.
    """
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return
    yield first
    for value in iterator:
        yield make_element()
        yield value


def intersperse(iterable: Iterable[T], element: T) -> Iterator[T]:
    """Yield the elements of ``iterable`` with ``element`` between each pair."""
    return intersperse_with(iterable, lambda: element)