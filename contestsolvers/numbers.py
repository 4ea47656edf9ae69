"""Problems whose input is a handful of integers."""

from __future__ import annotations

_LUCKY_DIGITS = frozenset("47")


def is_nearly_lucky(n: int) -> bool:
    """Return True if the count of digits 4 and 7 in ``n`` is itself 4 or 7."""
    if n <= 0:
        return False
    count = sum(digit in _LUCKY_DIGITS for digit in str(n))
    return count in (4, 7)


def moves_to_divisible(a: int, b: int) -> int:
    """Return the fewest increments of ``a`` that make it divisible by ``b``."""
    if a % b == 0:
        return 0
    return b * (a // b + 1) - a


def candy_distributions(n: int) -> int:
    """Return the ways to split ``n`` candies so one sister gets strictly more."""
    return max((n - 1) // 2, 0)


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons numbered 1..d whose number is divisible by k, l, m or n."""
    divisors = (k, l, m, n)
    return sum(
        1
        for dragon in range(1, d + 1)
        if any(dragon % divisor == 0 for divisor in divisors)
    )


def is_lucky_ticket(ticket: int | str) -> bool:
    """Return True if the first three digits of a six-digit ticket sum to the last three."""
    digits = f"{int(ticket):06d}"[-6:]
    first = sum(int(ch) for ch in digits[:3])
    last = sum(int(ch) for ch in digits[3:])
    return first == last


def _has_distinct_digits(value: int) -> bool:
    digits = str(value)
    return len(set(digits)) == len(digits)


def next_distinct_year(year: int) -> int:
    """Return the smallest year after ``year`` whose digits are all different."""
    candidate = year + 1
    while not _has_distinct_digits(candidate):
        candidate += 1
    return candidate


def alternating_sum(n: int) -> int:
    """Return -1 + 2 - 3 + ... + (-1)^n * n."""
    if n % 2 == 0:
        return n // 2
    return -((n + 1) // 2)


def can_split_watermelon(weight: int) -> bool:
    """Return True if ``weight`` splits into two positive even parts."""
    return weight > 2 and weight % 2 == 0


def max_dominoes(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m by n board."""
    return m * n // 2


def years_to_overtake(limak: int, bob: int) -> int:
    """Return the years until Limak, tripling yearly, outweighs Bob, doubling yearly."""
    if limak <= 0:
        raise ValueError("limak's weight must be positive")
    years = 1
    while limak * 3 <= bob * 2:
        limak *= 3
        bob *= 2
        years += 1
    return years


def wrong_subtraction(n: int, k: int) -> int:
    """Apply Tanya's subtraction of one, ``k`` times, to ``n``."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def balanced_array(n: int) -> list[int] | None:
    """Return an array of ``n`` distinct numbers, evens then odds, with equal half sums.

    Returns None when no such array exists.
    """
    if n % 4 != 0:
        return None
    half = n // 2
    evens = [2 * j for j in range(1, half + 1)]
    odds = [2 * i + 1 for i in range(half - 1)]
    odds.append(sum(evens) - sum(odds))
    return evens + odds