import itertools
import operator

from hypothesis import given
from hypothesis import strategies as st

from iterkit.kmerge import KMergeBy, kmerge, kmerge_by


def test_kmerge():
    its = (range(s, 10, 4) for s in range(4))
    assert list(kmerge(its)) == list(range(10))


def test_kmerge_2():
    its = (range(s, 10, 4) for s in [3, 2, 1, 0])
    assert list(kmerge(its)) == list(range(10))


def test_kmerge_empty():
    its = (range(0) for _ in range(4))
    assert next(kmerge(its), None) is None


def test_kmerge_size_hint():
    its = (range(10) for _ in range(5))
    assert operator.length_hint(kmerge(its)) == 50


def test_kmerge_empty_size_hint():
    its = (range(0) for _ in range(5))
    assert operator.length_hint(kmerge(its)) == 0


def test_kmerge_example_lists():
    result = list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
    assert result == [0, 1, 2, 3, 4, 5, 6, 7]


def test_kmerge_by_descending():
    merged = kmerge_by([[9, 5, 1], [8, 2], [7, 6, 0]], lambda a, b: a > b)
    assert list(merged) == [9, 8, 7, 6, 5, 2, 1, 0]


def test_kmerge_is_lazy_on_infinite_inputs():
    merged = kmerge([itertools.count(0, 2), itertools.count(1, 2)])
    assert list(itertools.islice(merged, 6)) == [0, 1, 2, 3, 4, 5]


def test_kmerge_is_fused():
    merged = KMergeBy([[1]], operator.lt)
    assert iter(merged) is merged
    assert next(merged) == 1
    assert next(merged, None) is None
    assert next(merged, None) is None


@given(st.lists(st.lists(st.integers())))
def test_kmerge_of_sorted_inputs_is_sorted(lists):
    sorted_lists = [sorted(xs) for xs in lists]
    expected = sorted(itertools.chain.from_iterable(lists))
    assert list(kmerge(sorted_lists)) == expected