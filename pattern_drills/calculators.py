"""Small arithmetic drills: chained operations, factorials, primes and digit games."""

from __future__ import annotations

import operator
from enum import Enum
from math import isqrt

__all__ = [
    "Operator",
    "TradeOutcome",
    "NumberKind",
    "evaluate_chain",
    "factorial",
    "permutations",
    "power",
    "trade_outcome",
    "grade",
    "classify_number",
    "even_digit_sum",
    "reverse_digits",
    "fibonacci",
    "countdown",
]

INVALID_OPERATOR = "Invalid operator! Use only +, -, *, or /"
DIVISION_BY_ZERO = "Division by zero is not allowed!"


class Operator(Enum):
    """The four basic arithmetic operators, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, left: float, right: float) -> float:
        """Combine two operands with this operator."""
        if self is Operator.DIVIDE and right == 0:
            raise ZeroDivisionError(DIVISION_BY_ZERO)
        return _FUNCTIONS[self](left, right)


_FUNCTIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


class TradeOutcome(Enum):
    """Whether a sale made a profit, a loss, or neither."""

    LOSS = "loss"
    PROFIT = "profit"
    BREAK_EVEN = "break even"


class NumberKind(Enum):
    """Classification of an integer as prime, composite, or neither."""

    NEITHER = "neither"
    PRIME = "prime"
    COMPOSITE = "composite"


def _as_operator(value: Operator | str) -> Operator:
    if isinstance(value, Operator):
        return value
    try:
        return Operator(value)
    except ValueError:
        raise ValueError(INVALID_OPERATOR) from None


def evaluate_chain(
    first: float,
    first_op: Operator | str,
    second: float,
    second_op: Operator | str,
    third: float,
) -> float:
    """Evaluate ``first first_op second second_op third`` strictly left to right.

    Both operators are checked before any division by zero is.
    """
    op1 = _as_operator(first_op)
    op2 = _as_operator(second_op)
    if (op1 is Operator.DIVIDE and second == 0) or (op2 is Operator.DIVIDE and third == 0):
        raise ZeroDivisionError(DIVISION_BY_ZERO)
    partial = op1.apply(float(first), float(second))
    return op2.apply(partial, float(third))


def factorial(n: int) -> int:
    """Return ``n!``; negative numbers have no factorial."""
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def permutations(n: int, r: int) -> int:
    """Return the number of ordered selections of ``r`` items out of ``n``."""
    if n < 0:
        raise ValueError("Please enter a valid positive number for n")
    if r < 0:
        raise ValueError("Please enter a valid positive number for r")
    if r > n:
        raise ValueError("r cannot be greater than n")
    return factorial(n) // factorial(n - r)


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def trade_outcome(cost_price: int, selling_price: int) -> tuple[TradeOutcome, int]:
    """Return the outcome of a sale and the size of the profit or loss."""
    if cost_price > selling_price:
        return TradeOutcome.LOSS, cost_price - selling_price
    if cost_price < selling_price:
        return TradeOutcome.PROFIT, selling_price - cost_price
    return TradeOutcome.BREAK_EVEN, 0


def grade(percentage: int) -> str:
    """Describe a result given as a percentage from 0 to 100."""
    if percentage < 0 or percentage > 100:
        raise ValueError("Not a correct input")
    if percentage <= 40:
        return "Your result is Fail"
    if percentage <= 60:
        return "You have average result"
    if percentage <= 80:
        return "You have good result"
    return "You have very good result"


def classify_number(n: int) -> NumberKind:
    """Tell whether ``n`` is prime, composite, or (below two) neither."""
    if n < 2:
        return NumberKind.NEITHER
    if any(n % divisor == 0 for divisor in range(2, isqrt(n) + 1)):
        return NumberKind.COMPOSITE
    return NumberKind.PRIME


def even_digit_sum(n: int) -> int:
    """Sum the even decimal digits of ``n``; the sum carries the sign of ``n``."""
    total = sum(int(digit) for digit in str(abs(n)) if int(digit) % 2 == 0)
    return -total if n < 0 else total


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_value = int(str(abs(n))[::-1])
    return -reversed_value if n < 0 else reversed_value


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``fibonacci(1) == 1``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def countdown(n: int) -> list[int]:
    """Return the numbers from ``n`` down to one."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(n, 0, -1))