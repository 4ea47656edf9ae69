# contestsolvers

Short solutions to a set of classic competitive-programming exercises. You
can use them as a Python library or from the command line. There are no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The solutions are grouped by the kind of input they take.

- `contestsolvers.numbers` takes a few integers. It has
  `is_nearly_lucky`, `moves_to_divisible`, `candy_distributions`,
  `damaged_dragons`, `is_lucky_ticket`, `next_distinct_year`,
  `alternating_sum`, `can_split_watermelon`, `max_dominoes`,
  `years_to_overtake`, `wrong_subtraction` and `balanced_array`.
  `balanced_array` returns `None` when no array exists.
- `contestsolvers.sequences` takes lists or small fixed groups of numbers.
  It has `is_hard`, `count_advancers`, `count_ahead`, `has_sum_triple`,
  `plus_or_minus`, `horseshoes_to_buy`, `count_solved`, `moves_to_center`,
  `gravity_flip`, `untreated_crimes`, `road_width`, `is_equilibrium`,
  `min_total_distance` and `mean_fraction`.
- `contestsolvers.strings` takes strings. It has `compare_ignore_case`,
  `process_string`, `gender_by_username`, `stones_to_remove`,
  `rearrange_sum`, `is_reverse`, `contains_hello`, `xor_digits`,
  `abbreviate`, `chess_winner`, `is_dangerous`, `hulk_feelings`,
  `run_bit_program`, `queue_after` and `decode_borze`.

Each function takes ordinary Python values and returns the answer:

```python
from contestsolvers.numbers import can_split_watermelon, max_dominoes
from contestsolvers.strings import abbreviate, decode_borze

can_split_watermelon(8)      # True
max_dominoes(2, 4)           # 4
abbreviate("localization")   # "l10n"
decode_borze(".-.--")        # "012"
```

If the input cannot be solved, a function raises `ValueError`. Examples are
a place outside the list in `count_advancers`, an empty list in
`mean_fraction`, or a bad symbol in `decode_borze`.

## Command line

The `contestsolvers` command solves one problem. It reads the problem's
input from standard input, in the usual contest format, and prints the
answer. Give the problem identifier as the only argument:

```
echo 8 | contestsolvers 4A
```

The command accepts these identifiers:

```
1030A 110A 112A 118A 1328A 1335A 148A 158A 1676A 1692A 1742A 1807A
228A 231A 236A 263A 266A 271A 282A 339A 405A 41A 427A 486A 4A 50A
58A 61A 677A 69A 705A 71A 723A 734A 791A 96A 977A 1343B 200B 266B 32B
```

If you give an unknown identifier, the argument parser rejects it. If the
input is malformed or runs out early, the command prints an `error:`
message to standard error and exits with status 1.

From Python, `contestsolvers.cli.solve(problem, text)` solves a problem in
the same way and returns the output as a string. For an unknown
identifier it raises `ValueError`.