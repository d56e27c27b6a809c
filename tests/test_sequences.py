import pytest

from algokit.sequences import (
    collecting_numbers,
    collecting_numbers_with_swaps,
    josephus,
    josephus_skip,
    nearest_smaller_values,
    nested_ranges,
    playlist,
    sliding_window_median,
    subarray_sums,
    sum_of_two_values,
    traffic_lights,
)


def test_collecting_numbers_sorted_needs_one_round():
    assert collecting_numbers([1, 2, 3, 4, 5]) == 1


def test_collecting_numbers_reversed_needs_n_rounds():
    values = list(range(8, 0, -1))
    assert collecting_numbers(values) == len(values)


def test_collecting_numbers_rejects_non_permutation():
    with pytest.raises(ValueError):
        collecting_numbers([1, 1, 3])


def test_collecting_numbers_with_swaps_matches_recount():
    values = [4, 2, 1, 5, 3]
    swaps = [(2, 3), (1, 5), (2, 3), (4, 4), (1, 2)]
    answers = collecting_numbers_with_swaps(values, swaps)
    current = list(values)
    assert len(answers) == len(swaps)
    for (a, b), answer in zip(swaps, answers):
        current[a - 1], current[b - 1] = current[b - 1], current[a - 1]
        assert answer == collecting_numbers(current)


def test_collecting_numbers_with_swaps_bad_position():
    with pytest.raises(ValueError):
        collecting_numbers_with_swaps([1, 2, 3], [(0, 2)])


def test_josephus_sample():
    assert josephus(7) == [2, 4, 6, 1, 5, 3, 7]


def test_josephus_agrees_with_skip_of_one():
    for n in range(0, 12):
        assert josephus(n) == josephus_skip(n, 1)


def test_josephus_skip_is_permutation():
    order = josephus_skip(10, 7)
    assert sorted(order) == list(range(1, 11))


def test_josephus_skip_zero_removes_in_order():
    assert josephus_skip(6, 0) == list(range(1, 7))


def test_josephus_skip_negative_k():
    with pytest.raises(ValueError):
        josephus_skip(5, -1)


def test_nearest_smaller_values_increasing_and_decreasing():
    assert nearest_smaller_values([1, 2, 3, 4]) == [0, 1, 2, 3]
    assert nearest_smaller_values([4, 3, 2, 1]) == [0, 0, 0, 0]


def test_nearest_smaller_values_invariant():
    values = [2, 5, 1, 4, 8, 3, 2, 5]
    result = nearest_smaller_values(values)
    for i, j in enumerate(result, start=1):
        if j:
            assert values[j - 1] < values[i - 1]
            assert all(v >= values[i - 1] for v in values[j:i - 1])
        else:
            assert all(v >= values[i - 1] for v in values[: i - 1])


def test_nested_ranges_chain():
    contains, contained = nested_ranges([(1, 10), (2, 9), (3, 8)])
    assert contains == [True, True, False]
    assert contained == [False, True, True]


def test_nested_ranges_disjoint():
    contains, contained = nested_ranges([(1, 2), (3, 4), (5, 6)])
    assert contains == [False, False, False]
    assert contained == [False, False, False]


def test_playlist_bounds():
    assert playlist([1, 2, 3, 4]) == 4
    assert playlist([7, 7, 7]) == 1
    assert playlist([]) == 0


def test_playlist_window_after_repeat():
    songs = [1, 2, 1, 3, 4, 2]
    assert playlist(songs) == len(set(songs))


def test_sliding_window_median_k1_is_identity():
    values = [5, 1, 4, 2]
    assert sliding_window_median(values, 1) == values


def test_sliding_window_median_full_window():
    values = [9, 3, 7, 1, 5]
    result = sliding_window_median(values, len(values))
    assert result == [sorted(values)[2]]


def test_sliding_window_median_length_and_membership():
    values = [2, 4, 3, 5, 8, 1, 2, 1]
    k = 3
    result = sliding_window_median(values, k)
    assert len(result) == len(values) - k + 1
    for i, m in enumerate(result):
        assert m in values[i : i + k]


def test_sliding_window_median_invalid_k():
    with pytest.raises(ValueError):
        sliding_window_median([1, 2], 3)


def test_subarray_sums_all_ones():
    assert subarray_sums([1] * 6, 2) == 6 - 2 + 1


def test_subarray_sums_no_match():
    assert subarray_sums([5, 5, 5], 1) == 0


def test_sum_of_two_values_found():
    values = [2, 7, 5, 1]
    target = 8
    result = sum_of_two_values(values, target)
    assert result is not None
    i, j = result
    assert i != j
    assert values[i - 1] + values[j - 1] == target


def test_sum_of_two_values_impossible():
    assert sum_of_two_values([1, 2, 3], 100) is None
    assert sum_of_two_values([4], 8) is None


def test_traffic_lights_first_and_monotone():
    length = 20
    positions = [7, 13, 2, 18, 10]
    result = traffic_lights(length, positions)
    assert len(result) == len(positions)
    assert result[0] == max(positions[0], length - positions[0])
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_traffic_lights_rejects_bad_positions():
    with pytest.raises(ValueError):
        traffic_lights(10, [10])
    with pytest.raises(ValueError):
        traffic_lights(10, [3, 3])