"""Group-and-fold operations over streams of key/value pairs."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")

__all__ = [
    "OneElement",
    "MinMax",
    "GroupingMap",
    "into_grouping_map",
    "into_grouping_map_by",
]


@dataclass(frozen=True)
class OneElement(Generic[V]):
    """A group that held a single element."""

    value: V


@dataclass(frozen=True)
class MinMax(Generic[V]):
    """The minimum and maximum of a group with at least two elements."""

    min: V
    max: V


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class GroupingMap(Generic[K, V]):
    """Groups ``(key, value)`` pairs by key while folding each group.

    The pairs are consumed by the first operation performed; every operation
    returns a ``dict`` mapping each key to the result for its group.
    """

    def __init__(self, pairs: Iterable[Tuple[K, V]]) -> None:
        self._pairs = iter(pairs)

    def aggregate(self, operation: Callable[[Any, K, V], Any]) -> Dict[K, Any]:
        """Fold each group with ``operation(acc, key, value)``.

        ``acc`` is ``None`` when the group has no accumulator. Returning
        ``None`` discards the accumulator; a group whose last step discards
        it has no entry in the result.
        """
        result: Dict[K, Any] = {}
        for key, value in self._pairs:
            acc = result.pop(key, None)
            new_acc = operation(acc, key, value)
            if new_acc is not None:
                result[key] = new_acc
        return result

    def fold(self, init: R, operation: Callable[[R, K, V], R]) -> Dict[K, R]:
        """Fold each group starting from a fresh copy of ``init``."""
        result: Dict[K, R] = {}
        for key, value in self._pairs:
            acc = result[key] if key in result else copy.deepcopy(init)
            result[key] = operation(acc, key, value)
        return result

    def fold_first(self, operation: Callable[[V, K, V], V]) -> Dict[K, V]:
        """Fold each group, using its first element as the initial accumulator."""
        result: Dict[K, V] = {}
        for key, value in self._pairs:
            if key in result:
                result[key] = operation(result[key], key, value)
            else:
                result[key] = value
        return result

    def collect(self, factory: Callable[[Iterable[V]], Any] = list) -> Dict[K, Any]:
        """Collect each group's elements, in order, into ``factory(elements)``."""
        groups: Dict[K, list] = {}
        for key, value in self._pairs:
            groups.setdefault(key, []).append(value)
        return {key: factory(values) for key, values in groups.items()}

    def max(self) -> Dict[K, V]:
        """Maximum of each group; the last of equal maxima wins."""
        return self.max_by(lambda _key, a, b: _cmp(a, b))

    def max_by(self, compare: Callable[[K, V, V], int]) -> Dict[K, V]:
        """Maximum of each group under ``compare(key, a, b)`` (negative, zero or positive)."""
        return self.fold_first(
            lambda acc, key, value: value if compare(key, acc, value) <= 0 else acc
        )

    def max_by_key(self, key: Callable[[K, V], Any]) -> Dict[K, V]:
        """Element of each group with the largest ``key(group_key, value)``."""
        return self.max_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def min(self) -> Dict[K, V]:
        """Minimum of each group; the first of equal minima wins."""
        return self.min_by(lambda _key, a, b: _cmp(a, b))

    def min_by(self, compare: Callable[[K, V, V], int]) -> Dict[K, V]:
        """Minimum of each group under ``compare(key, a, b)``."""
        return self.fold_first(
            lambda acc, key, value: acc if compare(key, acc, value) <= 0 else value
        )

    def min_by_key(self, key: Callable[[K, V], Any]) -> Dict[K, V]:
        """Element of each group with the smallest ``key(group_key, value)``."""
        return self.min_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def minmax(self) -> Dict[K, Any]:
        """Minimum and maximum of each group as ``OneElement`` or ``MinMax``."""
        return self.minmax_by(lambda _key, a, b: _cmp(a, b))

    def minmax_by(self, compare: Callable[[K, V, V], int]) -> Dict[K, Any]:
        """Minimum and maximum of each group under ``compare(key, a, b)``.

        The first of equal minima and the last of equal maxima are picked.
        """
        result: Dict[K, Any] = {}
        for key, value in self._pairs:
            current = result.get(key)
            if current is None:
                result[key] = OneElement(value)
            elif isinstance(current, OneElement):
                if compare(key, value, current.value) < 0:
                    result[key] = MinMax(value, current.value)
                else:
                    result[key] = MinMax(current.value, value)
            elif compare(key, value, current.min) < 0:
                result[key] = MinMax(value, current.max)
            elif compare(key, value, current.max) >= 0:
                result[key] = MinMax(current.min, value)
        return result

    def minmax_by_key(self, key: Callable[[K, V], Any]) -> Dict[K, Any]:
        """Elements of each group with the smallest and largest ``key(group_key, value)``."""
        return self.minmax_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def sum(self) -> Dict[K, V]:
        """Sum of each group's elements, starting from its first element."""
        return self.fold_first(lambda acc, _key, value: acc + value)

    def product(self) -> Dict[K, V]:
        """Product of each group's elements, starting from its first element."""
        return self.fold_first(lambda acc, _key, value: acc * value)


def into_grouping_map(pairs: Iterable[Tuple[K, V]]) -> GroupingMap[K, V]:
    """Build a ``GroupingMap`` from ``(key, value)`` pairs."""
    return GroupingMap(pairs)


def into_grouping_map_by(
    iterable: Iterable[V], key: Callable[[V], K]
) -> GroupingMap[K, V]:
    """Build a ``GroupingMap`` keying each element with ``key(element)``."""
    return GroupingMap((key(value), value) for value in iterable)