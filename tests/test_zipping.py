import itertools

from filmotheque.zipping import zip_longest, zip_shortest


def test_zip_shortest_stops_at_shortest():
    assert list(zip_shortest([1, 2, 3], "ab")) == [(1, "a"), (2, "b")]


def test_zip_shortest_equal_lengths():
    assert list(zip_shortest([1, 2], [3, 4], [5, 6])) == [(1, 3, 5), (2, 4, 6)]


def test_zip_shortest_no_arguments_is_empty():
    assert list(zip_shortest()) == []


def test_zip_shortest_with_empty_iterable():
    assert list(zip_shortest([1, 2], [])) == []


def test_zip_shortest_is_lazy_on_infinite_input():
    result = list(zip_shortest(itertools.count(), "xyz"))
    assert result == [(0, "x"), (1, "y"), (2, "z")]


def test_zip_longest_fills_with_none():
    assert list(zip_longest([1, 2, 3], "ab")) == [(1, "a"), (2, "b"), (3, None)]


def test_zip_longest_length_is_max():
    result = list(zip_longest(range(2), range(5), range(3)))
    assert len(result) == 5
    assert result[4] == (None, 4, None)


def test_zip_longest_no_arguments_is_empty():
    assert list(zip_longest()) == []


def test_zip_longest_all_empty():
    assert list(zip_longest([], [])) == []