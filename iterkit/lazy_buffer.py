"""A buffer that pulls elements from an iterator only when asked to."""

from __future__ import annotations

import itertools
from typing import Generic, Iterable, List, TypeVar

T = TypeVar("T")

__all__ = ["LazyBuffer"]


class LazyBuffer(Generic[T]):
    """Remembers the elements taken so far from an iterator."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self.it = iter(iterable)
        self._done = False
        self._buffer: List[T] = []

    def __len__(self) -> int:
        return len(self._buffer)

    def get_next(self) -> bool:
        """Buffer one more element; return whether one was available."""
        if self._done:
            return False
        for value in self.it:
            self._buffer.append(value)
            return True
        self._done = True
        return False

    def prefill(self, length: int) -> None:
        """Pull elements until the buffer holds ``length`` or the input ends."""
        if not self._done and length > len(self._buffer):
            delta = length - len(self._buffer)
            self._buffer.extend(itertools.islice(self.it, delta))
            self._done = len(self._buffer) < length

    def __getitem__(self, index):
        return self._buffer[index]