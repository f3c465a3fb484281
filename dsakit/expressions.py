"""Postfix evaluation, infix conversion and next greater/smaller elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

_DIGITS = frozenset("0123456789")


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Spaces are skipped; ``/`` divides integers, truncating toward zero.
    Raises ValueError for an unknown operator or a malformed expression.
    """
    stack: list[int] = []
    for ch in expression:
        if ch == " ":
            continue
        if ch in _DIGITS:
            stack.append(int(ch))
            continue
        apply = _OPERATORS.get(ch)
        if apply is None:
            raise ValueError(f"invalid operator encountered: {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} is missing an operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("expression has no operands")
    return stack[-1]


def precedence(op: str) -> int:
    """Return the binding strength of ``op``: 0 for anything not an operator."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    if op == "^":
        return 3
    return 0


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence associate to the left. Whitespace is
    ignored; unbalanced parentheses raise ValueError.
    """
    operators: list[str] = []
    postfix: list[str] = []
    for ch in infix:
        if ch.isspace():
            continue
        if ch.isascii() and ch.isalnum():
            postfix.append(ch)
        elif ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                postfix.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced ')'")
            operators.pop()
        else:
            while operators and precedence(operators[-1]) >= precedence(ch):
                postfix.append(operators.pop())
            operators.append(ch)
    if "(" in operators:
        raise ValueError("unbalanced '('")
    postfix.extend(reversed(operators))
    return "".join(postfix)


def _next_by(values: Sequence, beats: Callable[[object, object], bool]) -> list:
    answer = [-1] * len(values)
    waiting: list[int] = []
    for position, value in enumerate(values):
        while waiting and beats(value, values[waiting[-1]]):
            answer[waiting.pop()] = value
        waiting.append(position)
    return answer


def next_greater(values: Sequence) -> list:
    """For each item, the first later item greater than it, or -1 if none."""
    return _next_by(values, operator.gt)


def next_smaller(values: Sequence) -> list:
    """For each item, the first later item smaller than it, or -1 if none."""
    return _next_by(values, operator.lt)