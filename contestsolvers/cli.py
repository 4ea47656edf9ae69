"""Command line entry: solve a named problem from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from contestsolvers import numbers, sequences, strings


class _Input:
    """Whitespace tokens and lines of a problem's input text."""

    def __init__(self, text: str) -> None:
        self._lines = text.splitlines()
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def first_line(self) -> str:
        return self._lines[0] if self._lines else ""


_Solver = Callable[[_Input], str]
_SOLVERS: dict[str, _Solver] = {}


def _problem(name: str) -> Callable[[_Solver], _Solver]:
    def register(solver: _Solver) -> _Solver:
        _SOLVERS[name] = solver
        return solver

    return register


def _yes_no(flag: bool) -> str:
    if flag:
        verdict = "YES"
    else:
        verdict = "NO"
    return verdict


def _per_case(data: _Input, handle: Callable[[], str]) -> str:
    return "\n".join(handle() for _ in range(data.number()))


@_problem("1030A")
def _hard_problem(data: _Input) -> str:
    count = data.number()
    responses = data.numbers(count)
    if sequences.is_hard(responses):
        return "HARD"
    return "EASY"


@_problem("110A")
def _nearly_lucky(data: _Input) -> str:
    return _yes_no(numbers.is_nearly_lucky(data.number()))


@_problem("112A")
def _compare(data: _Input) -> str:
    return str(strings.compare_ignore_case(data.word(), data.word()))


@_problem("118A")
def _process(data: _Input) -> str:
    return strings.process_string(data.first_line())


@_problem("1328A")
def _divisibility(data: _Input) -> str:
    return _per_case(
        data, lambda: str(numbers.moves_to_divisible(data.number(), data.number()))
    )


@_problem("1335A")
def _candies(data: _Input) -> str:
    return _per_case(data, lambda: str(numbers.candy_distributions(data.number())))


@_problem("148A")
def _dragons(data: _Input) -> str:
    return str(numbers.damaged_dragons(*data.numbers(5)))


@_problem("158A")
def _advancers(data: _Input) -> str:
    n, k = data.numbers(2)
    return str(sequences.count_advancers(data.numbers(n), k))


@_problem("1676A")
def _lucky_ticket(data: _Input) -> str:
    return _per_case(data, lambda: _yes_no(numbers.is_lucky_ticket(data.word())))


@_problem("1692A")
def _marathon(data: _Input) -> str:
    return _per_case(data, lambda: str(sequences.count_ahead(*data.numbers(4))))


@_problem("1742A")
def _sum_triple(data: _Input) -> str:
    return _per_case(data, lambda: _yes_no(sequences.has_sum_triple(*data.numbers(3))))


@_problem("1807A")
def _plus_minus(data: _Input) -> str:
    return _per_case(data, lambda: sequences.plus_or_minus(*data.numbers(3)))


@_problem("228A")
def _horseshoes(data: _Input) -> str:
    return str(sequences.horseshoes_to_buy(data.numbers(4)))


@_problem("231A")
def _team(data: _Input) -> str:
    n = data.number()
    return str(sequences.count_solved(data.numbers(3) for _ in range(n)))


@_problem("236A")
def _username(data: _Input) -> str:
    return strings.gender_by_username(data.first_line())


@_problem("263A")
def _matrix(data: _Input) -> str:
    return str(sequences.moves_to_center([data.numbers(5) for _ in range(5)]))


@_problem("266A")
def _stones(data: _Input) -> str:
    n = data.number()
    return str(strings.stones_to_remove(data.word()[:n]))


@_problem("271A")
def _year(data: _Input) -> str:
    return str(numbers.next_distinct_year(data.number()))


@_problem("282A")
def _bit(data: _Input) -> str:
    return str(strings.run_bit_program(data.words(data.number())))


@_problem("339A")
def _helpful_maths(data: _Input) -> str:
    return strings.rearrange_sum(data.first_line())


@_problem("405A")
def _gravity(data: _Input) -> str:
    columns = sequences.gravity_flip(data.numbers(data.number()))
    return " ".join(map(str, columns))


@_problem("41A")
def _translation(data: _Input) -> str:
    return _yes_no(strings.is_reverse(data.word(), data.word()))


@_problem("427A")
def _police(data: _Input) -> str:
    return str(sequences.untreated_crimes(data.numbers(data.number())))


@_problem("486A")
def _alternating(data: _Input) -> str:
    return str(numbers.alternating_sum(data.number()))


@_problem("4A")
def _watermelon(data: _Input) -> str:
    return _yes_no(numbers.can_split_watermelon(data.number()))


@_problem("50A")
def _dominoes(data: _Input) -> str:
    return str(numbers.max_dominoes(data.number(), data.number()))


@_problem("58A")
def _chat(data: _Input) -> str:
    return _yes_no(strings.contains_hello(data.first_line()))


@_problem("61A")
def _ultra_fast(data: _Input) -> str:
    return strings.xor_digits(data.word(), data.word())


@_problem("677A")
def _fence(data: _Input) -> str:
    n, h = data.numbers(2)
    return str(sequences.road_width(data.numbers(n), h))


@_problem("69A")
def _equilibrium(data: _Input) -> str:
    n = data.number()
    return _yes_no(sequences.is_equilibrium([data.numbers(3) for _ in range(n)]))


@_problem("705A")
def _hulk(data: _Input) -> str:
    return strings.hulk_feelings(data.number())


@_problem("71A")
def _long_words(data: _Input) -> str:
    return "\n".join(strings.abbreviate(word) for word in data.words(data.number()))


@_problem("723A")
def _new_year(data: _Input) -> str:
    return str(sequences.min_total_distance(*data.numbers(3)))


@_problem("734A")
def _chess(data: _Input) -> str:
    n = data.number()
    return strings.chess_winner(data.word()[:n])


@_problem("791A")
def _bear(data: _Input) -> str:
    return str(numbers.years_to_overtake(data.number(), data.number()))


@_problem("96A")
def _football(data: _Input) -> str:
    return _yes_no(strings.is_dangerous(data.first_line()))


@_problem("977A")
def _subtraction(data: _Input) -> str:
    return str(numbers.wrong_subtraction(data.number(), data.number()))


@_problem("1343B")
def _balanced(data: _Input) -> str:
    def case() -> str:
        array = numbers.balanced_array(data.number())
        if array is None:
            return "NO"
        return "YES\n" + " ".join(map(str, array))

    return _per_case(data, case)


@_problem("200B")
def _drinks(data: _Input) -> str:
    return f"{sequences.mean_fraction(data.numbers(data.number())):.12f}"


@_problem("266B")
def _queue(data: _Input) -> str:
    _, seconds = data.numbers(2)
    return strings.queue_after(data.word(), seconds)


@_problem("32B")
def _borze(data: _Input) -> str:
    return strings.decode_borze(data.word())


def solve(problem: str, text: str) -> str:
    """Solve ``problem`` for the given input text and return the answer text."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Input(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="contestsolvers",
        description="Solve a contest problem, reading its input from stdin.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem identifier")
    args = parser.parse_args(argv)
    try:
        answer = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0