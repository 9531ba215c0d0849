"""Operation order: arithmetic with unusual precedence."""

import math
import operator
from collections.abc import Callable, Iterator

_DIGITS = "0123456789"
_OPERATORS: dict[str, Callable[[int, int], int]] = {"+": operator.add, "*": operator.mul}


def _evaluate(chars: Iterator[str]) -> int:
    accumulator = 0
    apply = operator.add
    for char in chars:
        if char in _DIGITS:
            accumulator = apply(accumulator, int(char))
        elif char in _OPERATORS:
            apply = _OPERATORS[char]
        elif char == ")":
            return accumulator
        elif char == "(":
            accumulator = apply(accumulator, _evaluate(chars))
    return accumulator


def evaluate(expression: str) -> int:
    """Evaluate left to right with + and * at equal precedence; single digits only."""
    return _evaluate(iter(expression))


def evaluate_with_priority(expression: str) -> int:
    """Evaluate with + binding tighter than *."""
    while (close := expression.find(")")) != -1:
        open_ = expression.rfind("(", 0, close)
        if open_ == -1:
            raise ValueError(f"unbalanced parentheses in {expression!r}")
        inner = evaluate_with_priority(expression[open_ + 1:close])
        expression = f"{expression[:open_]}{inner}{expression[close + 1:]}"
    return math.prod(
        sum(int(term) for term in factor.split("+"))
        for factor in expression.split("*")
    )


def part1(text: str) -> int:
    """Sum of every line evaluated left to right."""
    return sum(map(evaluate, text.splitlines()))


def part2(text: str) -> int:
    """Sum of every line evaluated with addition first."""
    return sum(map(evaluate_with_priority, text.splitlines()))