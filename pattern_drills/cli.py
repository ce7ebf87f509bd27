"""Command line front end for the drills."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from pattern_drills import patterns
from pattern_drills.calculators import (
    NumberKind,
    TradeOutcome,
    classify_number,
    countdown,
    evaluate_chain,
    even_digit_sum,
    fibonacci,
    grade,
    permutations,
    power,
    reverse_digits,
    trade_outcome,
)
from pattern_drills.sorting import bubble_sort, format_items, selection_sort

__all__ = ["main"]

PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "alphabet": patterns.alphabet_pattern,
    "complex": patterns.complex_pattern,
    "dabangg": patterns.dabangg_pattern,
    "diamond-star": patterns.diamond_star,
    "diamond": patterns.number_diamond,
    "number-triangle": patterns.number_triangle,
    "pascal": patterns.pascal_triangle,
    "pyramid": patterns.floyd_pyramid,
    "counting": patterns.counting_rows,
    "shifted": patterns.shifted_number_pattern,
    "star-triangle": patterns.star_triangle,
}

SORTERS = {"bubble": bubble_sort, "selection": selection_sort}
DEFAULT_VALUES = [6, 3, 2, 0, 4, 7]


def _countdown(args: argparse.Namespace) -> None:
    for value in countdown(args.n):
        print(value)


def _calc(args: argparse.Namespace) -> None:
    result = evaluate_chain(args.first, args.first_op, args.second, args.second_op, args.third)
    print(f"Result: {result:g}")


def _permutation(args: argparse.Namespace) -> None:
    print(f"Permutation is: {permutations(args.n, args.r)}")


def _power(args: argparse.Namespace) -> None:
    print(f"power is : {power(args.base, args.exponent)}")


def _profit(args: argparse.Namespace) -> None:
    outcome, amount = trade_outcome(args.cost_price, args.selling_price)
    if outcome is TradeOutcome.LOSS:
        print(f"you made a loss\nyou have loss of : {amount}")
    elif outcome is TradeOutcome.PROFIT:
        print(f"you made a profit\nyou have profit of : {amount}")
    else:
        print("you have not made a profit and lose")


def _grade(args: argparse.Namespace) -> None:
    print(grade(args.percentage))


def _prime(args: argparse.Namespace) -> None:
    kind = classify_number(args.n)
    if kind is NumberKind.NEITHER:
        print("Not a prime and not a composite number")
    else:
        print(f"{args.n} is a {kind.value} number.")


def _even_sum(args: argparse.Namespace) -> None:
    print(f"sum of even number is : {even_digit_sum(args.n)}")


def _reverse_sum(args: argparse.Namespace) -> None:
    reversed_value = reverse_digits(args.n)
    print(reversed_value)
    print(f"Total number of sum is : {args.n + reversed_value}")


def _fibonacci(args: argparse.Namespace) -> None:
    print(f"fibonacci of  {args.n} is : {fibonacci(args.n)}")


def _pattern(args: argparse.Namespace) -> None:
    for line in PATTERNS[args.name](args.rows):
        print(line)


def _sort(args: argparse.Namespace) -> None:
    values = args.values if args.values else DEFAULT_VALUES
    print(f"Before sorting: {format_items(values)}")
    print(f"After sorting: {format_items(SORTERS[args.algorithm](values))}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pattern-drills", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("countdown", help="count down to one")
    cmd.add_argument("n", type=int)
    cmd.set_defaults(handler=_countdown)

    cmd = commands.add_parser("calc", help="evaluate a op b op c left to right")
    cmd.add_argument("first", type=float)
    cmd.add_argument("first_op")
    cmd.add_argument("second", type=float)
    cmd.add_argument("second_op")
    cmd.add_argument("third", type=float)
    cmd.set_defaults(handler=_calc)

    cmd = commands.add_parser("permutation", help="ordered selections of r from n")
    cmd.add_argument("n", type=int)
    cmd.add_argument("r", type=int)
    cmd.set_defaults(handler=_permutation)

    cmd = commands.add_parser("power", help="integer power")
    cmd.add_argument("base", type=int)
    cmd.add_argument("exponent", type=int)
    cmd.set_defaults(handler=_power)

    cmd = commands.add_parser("profit", help="profit or loss of a sale")
    cmd.add_argument("cost_price", type=int)
    cmd.add_argument("selling_price", type=int)
    cmd.set_defaults(handler=_profit)

    cmd = commands.add_parser("grade", help="describe a percentage result")
    cmd.add_argument("percentage", type=int)
    cmd.set_defaults(handler=_grade)

    cmd = commands.add_parser("prime", help="prime or composite")
    cmd.add_argument("n", type=int)
    cmd.set_defaults(handler=_prime)

    cmd = commands.add_parser("even-sum", help="sum of even digits")
    cmd.add_argument("n", type=int)
    cmd.set_defaults(handler=_even_sum)

    cmd = commands.add_parser("reverse-sum", help="reverse a number and add it to itself")
    cmd.add_argument("n", type=int)
    cmd.set_defaults(handler=_reverse_sum)

    cmd = commands.add_parser("fibonacci", help="n-th Fibonacci number")
    cmd.add_argument("n", type=int)
    cmd.set_defaults(handler=_fibonacci)

    cmd = commands.add_parser("pattern", help="draw a text pattern")
    cmd.add_argument("name", choices=sorted(PATTERNS))
    cmd.add_argument("rows", type=int)
    cmd.set_defaults(handler=_pattern)

    cmd = commands.add_parser("sort", help="sort integers and show before and after")
    cmd.add_argument("values", type=int, nargs="*")
    cmd.add_argument("--algorithm", choices=sorted(SORTERS), default="bubble")
    cmd.set_defaults(handler=_sort)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one drill; return 0 on success and 1 when the input is rejected."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())