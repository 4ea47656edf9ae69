"""Problems whose input is a list or a small fixed group of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_CENTER = 2


def is_hard(responses: Iterable[int]) -> bool:
    """Return True if anyone answered 1, meaning the problem is hard."""
    return any(response == 1 for response in responses)


def count_advancers(scores: Sequence[int], k: int) -> int:
    """Count participants with a positive score at least the k-th place score."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"place {k} is outside 1..{len(scores)}")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def count_ahead(a: int, b: int, c: int, d: int) -> int:
    """Count how many of b, c and d ran further than a."""
    return sum(other > a for other in (b, c, d))


def has_sum_triple(a: int, b: int, c: int) -> bool:
    """Return True if one of the numbers is the sum of the other two."""
    low, mid, high = sorted((a, b, c))
    return low + mid == high


def plus_or_minus(a: int, b: int, c: int) -> str:
    """Return "+" if a + b equals c, otherwise "-"."""
    total = a + b
    if total == c:
        return "+"
    return "-"


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Return how many horseshoes must be replaced so that all colours differ."""
    return len(colors) - len(set(colors))


def count_solved(problems: Iterable[Sequence[int]]) -> int:
    """Count problems at least two of the three friends are sure about."""
    return sum(
        1 for views in problems if sum(view == 1 for view in views) >= 2
    )


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Return row and column swaps needed to move the ones to the centre of a 5x5 grid."""
    return sum(
        abs(row - _CENTER) + abs(col - _CENTER)
        for row, cells in enumerate(matrix)
        for col, cell in enumerate(cells)
        if cell == 1
    )


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Return column heights after gravity pulls the cubes to the right."""
    return sorted(columns)


def untreated_crimes(events: Iterable[int]) -> int:
    """Count crimes that happen while no recruited officer is free."""
    officers = 0
    untreated = 0
    for event in events:
        if event > 0:
            officers += event
        elif officers > 0:
            officers -= 1
        else:
            untreated += 1
    return untreated


def road_width(heights: Iterable[int], fence_height: int) -> int:
    """Return the road width needed: two for anyone taller than the fence, else one."""
    return sum(2 if height > fence_height else 1 for height in heights)


def is_equilibrium(forces: Iterable[Sequence[int]]) -> bool:
    """Return True if the three-dimensional force vectors sum to zero."""
    totals = [0, 0, 0]
    for force in forces:
        totals = [total + part for total, part in zip(totals, force)]
    return totals == [0, 0, 0]


def min_total_distance(x1: int, x2: int, x3: int) -> int:
    """Return the least total distance three friends travel to meet at one point."""
    points = (x1, x2, x3)
    return max(points) - min(points)


def mean_fraction(values: Sequence[float]) -> float:
    """Return the mean of the given percentages."""
    if not values:
        raise ValueError("no values to average")
    return sum(values) / len(values)