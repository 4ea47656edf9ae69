import itertools
from collections import Counter

import pytest

from contestsolvers.sequences import (
    count_advancers,
    count_ahead,
    count_solved,
    gravity_flip,
    has_sum_triple,
    horseshoes_to_buy,
    is_equilibrium,
    is_hard,
    mean_fraction,
    min_total_distance,
    moves_to_center,
    plus_or_minus,
    road_width,
    untreated_crimes,
)


def test_is_hard_when_someone_says_one():
    assert is_hard([0, 0, 1])


def test_is_easy_when_nobody_says_one():
    assert not is_hard([0, 0, 0])
    assert not is_hard([])


def test_count_advancers_all_zero():
    assert count_advancers([0, 0, 0, 0], 2) == 0


@pytest.mark.parametrize("k", [1, 3, 5, 8])
def test_count_advancers_at_least_k(k):
    scores = [10, 9, 8, 7, 7, 7, 5, 5]
    result = count_advancers(scores, k)
    assert k <= result <= len(scores)
    assert all(score >= scores[k - 1] for score in scores[:result])


@pytest.mark.parametrize("k", [0, 5])
def test_count_advancers_bad_place(k):
    with pytest.raises(ValueError):
        count_advancers([3, 2, 1, 0], k)


def test_count_ahead_extremes():
    assert count_ahead(100, 1, 2, 3) == 0
    assert count_ahead(0, 1, 2, 3) == 3


def test_count_ahead_ties_not_counted():
    assert count_ahead(5, 5, 5, 5) == 0


@pytest.mark.parametrize("triple", [(1, 4, 3), (2, 2, 4), (0, 0, 0)])
def test_has_sum_triple_any_order(triple):
    for order in itertools.permutations(triple):
        assert has_sum_triple(*order)


def test_has_sum_triple_false():
    assert not has_sum_triple(2, 5, 8)


def test_plus_or_minus():
    assert plus_or_minus(1, 2, 3) == "+"
    assert plus_or_minus(3, 2, 1) == "-"


def test_horseshoes_all_distinct():
    assert horseshoes_to_buy([1, 7, 3, 9]) == 0


def test_horseshoes_all_same():
    assert horseshoes_to_buy([7, 7, 7, 7]) == 3


@pytest.mark.parametrize("colors", [[1, 7, 3, 3], [5, 5, 6, 6], [2, 2, 2, 9]])
def test_horseshoes_match_distinct_count(colors):
    assert horseshoes_to_buy(colors) + len(set(colors)) == len(colors)


def test_count_solved_counts_majorities():
    problems = [(1, 1, 0), (1, 1, 1), (1, 0, 0), (0, 0, 0)]
    assert count_solved(problems) == 2


def test_count_solved_bounded():
    problems = list(itertools.product((0, 1), repeat=3))
    assert 0 <= count_solved(problems) <= len(problems)


def _grid_with_one(row, col):
    return [[1 if (r, c) == (row, col) else 0 for c in range(5)] for r in range(5)]


def test_moves_to_center_already_there():
    assert moves_to_center(_grid_with_one(2, 2)) == 0


@pytest.mark.parametrize("row,col", [(0, 0), (0, 4), (4, 0), (4, 4)])
def test_moves_to_center_corners_equal(row, col):
    assert moves_to_center(_grid_with_one(row, col)) == moves_to_center(
        _grid_with_one(0, 0)
    )


@pytest.mark.parametrize("row,col", [(0, 1), (3, 4), (1, 2)])
def test_moves_to_center_transpose_symmetric(row, col):
    assert moves_to_center(_grid_with_one(row, col)) == moves_to_center(
        _grid_with_one(col, row)
    )


@pytest.mark.parametrize("columns", [[3, 2, 1, 2], [2, 3, 8], [5], []])
def test_gravity_flip_sorted_permutation(columns):
    result = gravity_flip(columns)
    assert Counter(result) == Counter(columns)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_untreated_crimes_sample():
    assert untreated_crimes([-1, -1, 1]) == 2


def test_untreated_crimes_all_crimes():
    events = [-1] * 6
    assert untreated_crimes(events) == len(events)


def test_untreated_crimes_officers_first():
    assert untreated_crimes([3, -1, -1, -1]) == 0


def test_road_width_short_people():
    heights = [4, 5, 6]
    assert road_width(heights, 7) == len(heights)


def test_road_width_tall_people():
    heights = [4, 5, 6]
    assert road_width(heights, 1) == 2 * len(heights)


def test_equilibrium_with_opposites():
    forces = [(4, 1, 7), (-2, 4, -1)]
    opposites = [tuple(-part for part in force) for force in forces]
    assert is_equilibrium(forces + opposites)


def test_not_equilibrium():
    assert not is_equilibrium([(4, 1, 7), (-2, 4, -1), (1, -5, -3)])


def test_min_total_distance_sorted_input():
    assert min_total_distance(1, 4, 7) == 7 - 1


def test_min_total_distance_order_free():
    results = {min_total_distance(*p) for p in itertools.permutations((7, 1, 4))}
    assert results == {6}


def test_mean_fraction_equal_values():
    assert mean_fraction([50, 50, 50]) == pytest.approx(50)


@pytest.mark.parametrize("values", [[50, 50, 100], [0, 25, 50, 75], [100]])
def test_mean_fraction_between_bounds(values):
    mean = mean_fraction(values)
    assert min(values) <= mean <= max(values)
    assert mean * len(values) == pytest.approx(sum(values))


def test_mean_fraction_empty():
    with pytest.raises(ValueError):
        mean_fraction([])