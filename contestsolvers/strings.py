"""Problems whose input is one or more strings."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

_VOWELS = frozenset("aeiouy")
_TARGET_GREETING = "hello"
_BORZE_PAIRS = {".": "1", "-": "2"}


def compare_ignore_case(a: str, b: str) -> int:
    """Compare two strings case-insensitively: 0 if equal, 1 if a > b, -1 if a < b."""
    left, right = a.lower(), b.lower()
    if left == right:
        return 0
    return 1 if right < left else -1


def process_string(s: str) -> str:
    """Drop vowels, lower-case the rest and put a dot before each remaining character."""
    lowered = (ch.lower() if "A" <= ch <= "Z" else ch for ch in s)
    return "".join(f".{ch}" for ch in lowered if ch not in _VOWELS)


def gender_by_username(name: str) -> str:
    """Guess the user's gender by the parity of distinct characters in the name."""
    if len(set(name)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def stones_to_remove(colors: str) -> int:
    """Count stones to take so that no two neighbouring stones share a colour."""
    return sum(left == right for left, right in zip(colors, colors[1:]))


def rearrange_sum(expression: str) -> str:
    """Return the digits of a sum in non-decreasing order, joined by plus signs."""
    return "+".join(sorted(ch for ch in expression if "0" <= ch <= "9"))


def is_reverse(s: str, t: str) -> bool:
    """Return True if ``t`` is ``s`` written backwards."""
    return s == t[::-1]


def contains_hello(s: str) -> bool:
    """Return True if "hello" can be read from ``s`` by deleting characters."""
    remaining = iter(s)
    return all(ch in remaining for ch in _TARGET_GREETING)


def xor_digits(a: str, b: str) -> str:
    """Return a binary string with 1 wherever the two binary strings differ."""
    if len(b) < len(a):
        raise ValueError("second string is shorter than the first")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def chess_winner(games: str) -> str:
    """Name who won more games: "Danik" for D, "Anton" for A, else "Friendship"."""
    danik = games.count("D")
    anton = games.count("A")
    if danik > anton:
        return "Danik"
    if danik < anton:
        return "Anton"
    return "Friendship"


def is_dangerous(situation: str) -> bool:
    """Return True if seven or more players of one team stand in a row."""
    return any(sum(1 for _ in run) >= 7 for _, run in groupby(situation))


def hulk_feelings(n: int) -> str:
    """Return Hulk's feelings of ``n`` layers, alternating hate and love."""
    if n <= 0:
        return ""
    feelings = ["I hate" if layer % 2 == 0 else "I love" for layer in range(n)]
    return " that ".join(feelings) + " it"


def run_bit_program(statements: Iterable[str]) -> int:
    """Execute Bit++ statements on x, which starts at zero, and return x."""
    x = 0
    for statement in statements:
        if len(statement) < 2:
            raise ValueError(f"malformed statement {statement!r}")
        x += 1 if statement[1] == "+" else -1
    return x


def queue_after(queue: str, seconds: int) -> str:
    """Return the queue after each second lets girls step ahead of boys before them."""
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue


def decode_borze(code: str) -> str:
    """Decode a Borze string: "." is 0, "-." is 1 and "--" is 2."""
    digits = []
    symbols = iter(code)
    for symbol in symbols:
        if symbol == ".":
            digits.append("0")
        elif symbol == "-":
            follower = next(symbols, None)
            if follower is None:
                raise ValueError("Borze code ends in the middle of a digit")
            if follower not in _BORZE_PAIRS:
                raise ValueError(f"invalid Borze symbol {follower!r}")
            digits.append(_BORZE_PAIRS[follower])
        else:
            raise ValueError(f"invalid Borze symbol {symbol!r}")
    return "".join(digits)