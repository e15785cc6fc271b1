import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.k_smallest import k_smallest


@given(
    st.integers(min_value=0, max_value=10**6),
    st.integers(min_value=0, max_value=300),
    st.integers(min_value=0, max_value=400),
    st.randoms(),
)
def test_k_smallest_range(n, m, k, rng):
    values = list(range(n, n + m))
    rng.shuffle(values)
    assert k_smallest(iter(values), k) == list(range(n, n + min(k, m)))


@given(st.lists(st.integers(min_value=-128, max_value=127)), st.integers(0, 50))
def test_k_smallest_sort_small_ints(values, k):
    assert k_smallest(iter(values), k) == sorted(values)[:k]


@given(st.lists(st.integers()), st.integers(0, 100))
def test_k_smallest_sort_large_ints(values, k):
    assert k_smallest(values, k) == sorted(values)[:k]


def test_k_zero_consumes_nothing():
    it = iter([3, 1, 2])
    assert k_smallest(it, 0) == []
    assert next(it) == 3


def test_negative_k_raises():
    with pytest.raises(ValueError):
        k_smallest([1, 2, 3], -1)


def test_k_larger_than_input():
    values = list(range(20))
    random.Random(4).shuffle(values)
    assert k_smallest(values, 100) == list(range(20))