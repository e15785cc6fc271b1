import pytest

from iterkit.lazy_buffer import LazyBuffer


def test_starts_empty_without_consuming():
    it = iter([5, 6, 7])
    buf = LazyBuffer(it)
    assert len(buf) == 0
    assert next(buf.it) == 5


def test_get_next_buffers_in_order():
    data = ["a", "b"]
    buf = LazyBuffer(data)
    assert buf.get_next() is True
    assert buf.get_next() is True
    assert buf[0] == data[0]
    assert buf[1] == data[1]
    assert buf.get_next() is False
    assert buf.get_next() is False
    assert len(buf) == len(data)


def test_prefill_takes_only_what_is_needed():
    data = [5, 6, 7, 8]
    buf = LazyBuffer(data)
    buf.prefill(3)
    assert len(buf) == 3
    assert buf[:] == data[:3]
    assert next(buf.it) == data[3]


def test_prefill_beyond_end_marks_done():
    data = [1, 2]
    buf = LazyBuffer(data)
    buf.prefill(10)
    assert len(buf) == len(data)
    assert buf.get_next() is False


def test_prefill_smaller_than_buffer_is_noop():
    data = [1, 2, 3]
    buf = LazyBuffer(data)
    buf.prefill(2)
    buf.prefill(1)
    assert len(buf) == 2


def test_index_out_of_range():
    buf = LazyBuffer([1])
    buf.prefill(1)
    assert buf[0] == 1
    assert len(buf) == 1
    with pytest.raises(IndexError):
        _ = buf[1]
    assert buf[-1] == 1


def test_round_trip_all_elements():
    data = list(range(17))
    buf = LazyBuffer(data)
    while buf.get_next():
        pass
    assert buf[:] == data