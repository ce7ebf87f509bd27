# pattern-drills

A small collection of the exercises every programming course starts with,
written as plain, importable Python:

- **Text patterns** (`pattern_drills.patterns`): star and number triangles,
  diamonds, Floyd's pyramid, Pascal's triangle, an alphabet staircase and a
  few more.
- **Sorting** (`pattern_drills.sorting`): bubble sort, selection sort and
  reversing a sequence.
- **Calculators** (`pattern_drills.calculators`): a two-operator arithmetic
  chain, factorials and permutations, integer powers, profit/loss, grading,
  prime checks, digit tricks, Fibonacci numbers and a countdown.

No third-party dependencies are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `pattern-drills` command. Each drill is a
subcommand that takes its input as arguments:

```
pattern-drills --help
pattern-drills pattern pyramid 4
pattern-drills calc 2 + 3 '*' 4
pattern-drills sort 5 1 4 --algorithm selection
```

| Subcommand | Arguments | Prints |
| --- | --- | --- |
| `countdown` | `n` | the numbers from `n` down to 1, one per line |
| `calc` | `first first_op second second_op third` | `Result: ...`, evaluated left to right |
| `permutation` | `n r` | `Permutation is: ...` |
| `power` | `base exponent` | `power is : ...` |
| `profit` | `cost_price selling_price` | whether the sale made a profit or a loss, and how much |
| `grade` | `percentage` | the verbal grade |
| `prime` | `n` | whether `n` is prime, composite, or neither |
| `even-sum` | `n` | the sum of the even digits of `n` |
| `reverse-sum` | `n` | `n` reversed, then `n` plus its reverse |
| `fibonacci` | `n` | the `n`-th Fibonacci number |
| `pattern` | `name rows` | one of the patterns below |
| `sort` | `[values ...] [--algorithm {bubble,selection}]` | the values before and after sorting |

Pattern names are `alphabet`, `complex`, `counting`, `dabangg`, `diamond`,
`diamond-star`, `number-triangle`, `pascal`, `pyramid`, `shifted` and
`star-triangle`. Without values, `sort` uses `6 3 2 0 4 7`; the default
algorithm is `bubble`.

The command exits with status 0 on success. When the input is rejected (an
invalid operator, a division by zero, a negative factorial, a percentage
outside 0–100 and so on) it prints `Error: <reason>` and exits with status 1.

## Library use

### Patterns

Every function in `pattern_drills.patterns` takes a row count and returns the
rows as a list of strings without line endings; a count below one gives an
empty list.

| Function | Pattern |
| --- | --- |
| `star_triangle(rows)` | right-aligned triangle of stars |
| `number_triangle(rows)` | right-aligned; row *i* repeats the number *i*, *i* times |
| `floyd_pyramid(rows)` | right-aligned consecutive numbers continuing across rows |
| `counting_rows(rows)` | each row counts from 1 up to its row number |
| `pascal_triangle(rows)` | Pascal's triangle, indented, each entry followed by a space |
| `number_diamond(rows)` | digits rising to the row number and falling back, centred |
| `diamond_star(rows)` | star diamond, widest in the middle row |
| `alphabet_pattern(rows)` | `D`, `C D`, `B C D`, ... each letter followed by a space |
| `dabangg_pattern(rows)` | counting up and back down around a widening band of stars |
| `shifted_number_pattern(rows)` | row *i* counts from *i* to `rows`, indented by *i* // 2 |
| `complex_pattern(rows)` | a block of stars `rows + 2` wide, hollow in rows two and three |

```python
from pattern_drills.patterns import star_triangle, binomial

star_triangle(3)   # ['  *', ' **', '***']
binomial(5, 2)     # 10
```

### Sorting

```python
from pattern_drills.sorting import bubble_sort, selection_sort, reversed_items, format_items

bubble_sort([6, 3, 2, 0, 4, 7])      # [0, 2, 3, 4, 6, 7]
selection_sort([2, 4, 6, 1, 3])      # [1, 2, 3, 4, 6]
reversed_items([1, 2, 3, 4, 5])      # [5, 4, 3, 2, 1]
format_items([1, 2, 3])              # '1 2 3 '
```

Both sorts return a new list and leave their input untouched.

### Calculators

```python
from pattern_drills.calculators import (
    factorial, permutations, power, fibonacci, reverse_digits, even_digit_sum,
)

factorial(5)          # 120
permutations(5, 2)    # 20
power(2, 10)          # 1024
fibonacci(10)         # 55
reverse_digits(123)   # 321
even_digit_sum(1234)  # 6
```

Other helpers in the same module:

- `evaluate_chain(first, first_op, second, second_op, third)` applies two
  operators strictly left to right. Operators may be `Operator` members or
  their symbols `+`, `-`, `*`, `/`; anything else raises `ValueError`, and
  dividing by zero raises `ZeroDivisionError`.
- `trade_outcome(cost_price, selling_price)` returns a `(TradeOutcome, amount)`
  pair: `LOSS`, `PROFIT` or `BREAK_EVEN` with the size of the difference.
- `grade(percentage)` returns the verbal grade for a percentage from 0 to 100
  and raises `ValueError` outside that range.
- `classify_number(n)` returns a `NumberKind`: `PRIME`, `COMPOSITE`, or
  `NEITHER` for numbers below 2.
- `even_digit_sum(n)` and `reverse_digits(n)` work digit by digit and keep the
  sign of a negative `n`.
- `countdown(n)` returns the numbers from `n` down to 1.

Invalid input, such as a negative factorial, a negative exponent, `r` greater
than `n` in `permutations`, or `fibonacci(0)`, raises `ValueError` rather than
returning a sentinel value.

## What it does not do

The command does not prompt for input interactively; every drill takes its
values as command-line arguments, and each invocation runs a single drill.