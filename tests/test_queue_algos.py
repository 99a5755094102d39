import pytest

from dsakit.queue_algos import (
    circular_tour,
    first_negatives,
    first_non_repeating,
    reverse_first_k,
    sum_of_window_extremes,
)

PETROL = [6, 7, 4, 10, 6, 5]
DISTANCE = [5, 6, 7, 8, 6, 4]


def test_circular_tour_example():
    assert circular_tour(PETROL, DISTANCE) == 3


def test_circular_tour_start_never_runs_dry():
    start = circular_tour(PETROL, DISTANCE)
    n = len(PETROL)
    tank = 0
    for step in range(n):
        i = (start + step) % n
        tank += PETROL[i] - DISTANCE[i]
        assert tank >= 0


def test_circular_tour_impossible():
    assert circular_tour([1, 2], [3, 3]) is None


def test_circular_tour_length_mismatch():
    with pytest.raises(ValueError):
        circular_tour([1, 2], [1])


def test_circular_tour_single_station():
    assert circular_tour([5], [5]) == 0


def test_first_non_repeating_example():
    assert first_non_repeating("aabcdeee") == "a#bbbbbb"


def test_first_non_repeating_properties():
    text = "abcabcxyz"
    result = first_non_repeating(text)
    assert len(result) == len(text)
    for i, ch in enumerate(result):
        prefix = text[: i + 1]
        if ch != "#":
            assert prefix.count(ch) == 1


def test_first_non_repeating_empty_and_distinct():
    assert first_non_repeating("") == ""
    assert first_non_repeating("xyz") == "xxx"


def test_first_negatives_example():
    values = [-1, 8, -2, -4, -6, 9, 20, -7]
    assert first_negatives(values, 2) == [-1, -2, -2, -4, -6, 0, -7]


def test_first_negatives_all_positive():
    values = [3, 1, 4, 1, 5]
    assert first_negatives(values, 3) == [0] * (len(values) - 3 + 1)


def test_first_negatives_all_negative():
    values = [-3, -1, -4, -1, -5]
    assert first_negatives(values, 2) == values[: len(values) - 1]


@pytest.mark.parametrize("k", [0, 6])
def test_first_negatives_bad_window(k):
    with pytest.raises(ValueError):
        first_negatives([1, -2, 3, -4, 5], k)


def test_reverse_first_k_example():
    q = [10, 20, 30, 40, 50, 60, 70, 80, 90]
    assert reverse_first_k(q, 3) == q[2::-1] + q[3:]


def test_reverse_first_k_edges():
    q = [1, 2, 3, 4]
    assert reverse_first_k(q, 0) == q
    assert reverse_first_k(q, len(q)) == q[::-1]
    assert q == [1, 2, 3, 4]


@pytest.mark.parametrize("k", [-1, 5])
def test_reverse_first_k_bad_count(k):
    with pytest.raises(ValueError):
        reverse_first_k([1, 2, 3, 4], k)


def test_sum_of_window_extremes_example():
    assert sum_of_window_extremes([2, 5, -1, 7, -3, -1, -2], 4) == 18


def test_sum_of_window_extremes_whole_window():
    values = [4, -9, 12, 3]
    assert sum_of_window_extremes(values, len(values)) == max(values) + min(values)


def test_sum_of_window_extremes_constant():
    values = [7] * 6
    assert sum_of_window_extremes(values, 2) == 2 * 7 * (len(values) - 2 + 1)


@pytest.mark.parametrize("k", [0, 4])
def test_sum_of_window_extremes_bad_window(k):
    with pytest.raises(ValueError):
        sum_of_window_extremes([1, 2, 3], k)