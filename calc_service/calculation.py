import math
from types import MappingProxyType
from typing import List, Sequence

from calc_service.errors import (
    UnbalancedBracketsException,
    InsufficientValuesException,
    DivisionByZeroException,
    DisallowedCharacterException,
)

# "(" sits at 0 so the popping rule never removes it; ")" has no entry
PRIORITY = MappingProxyType({
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "(": 0,
})

OPERATORS = ("+", "-", "*", "/")

NUMBER_CHARS = frozenset("0123456789.")


def calc(expression: str) -> float:
    """Evaluate an infix expression of numbers, + - * / and parentheses."""
    postfix = convert_to_postfix(expression)
    return evaluate_postfix(postfix)


def convert_to_postfix(expression: str) -> List[str]:
    """
    Shunting-yard conversion of an infix expression into postfix tokens.

    Numbers go straight to the output as their source text; operators wait on
    a stack until an operator of lower priority arrives. Number shape is not
    checked here, "1.2.3" comes out as one token and fails on evaluation.
    """
    postfix = []
    operators = []

    def push_operator(op):
        while operators and PRIORITY[operators[-1]] >= PRIORITY[op]:
            postfix.append(operators.pop())
        operators.append(op)

    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]

        if char in NUMBER_CHARS:
            start = i
            while i < length and expression[i] in NUMBER_CHARS:
                i += 1
            postfix.append(expression[start:i])
            continue

        if char in OPERATORS:
            push_operator(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                postfix.append(operators.pop())
            if not operators:
                raise UnbalancedBracketsException("closing bracket without an opening one")
            operators.pop()
        elif not char.isspace():
            raise DisallowedCharacterException(f"unexpected character {char!r} at position {i}")
        i += 1

    while operators:
        op = operators.pop()
        if op == "(":
            raise UnbalancedBracketsException("opening bracket is never closed")
        postfix.append(op)

    return postfix


def apply_operator(op: str, a: float, b: float) -> float:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if b == 0:
        raise DivisionByZeroException()
    return a / b


def evaluate_postfix(sequence: Sequence[str]) -> float:
    """Reduce a postfix token sequence to a single value."""
    stack = []

    for elem in sequence:
        if elem in OPERATORS:
            if len(stack) < 2:
                raise InsufficientValuesException(f"operator {elem!r} needs two values, got {len(stack)}")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(elem, a, b))
            continue

        try:
            value = float(elem)
        except (TypeError, ValueError):
            raise DisallowedCharacterException(f"{elem!r} is not a number") from None
        if not math.isfinite(value):
            raise DisallowedCharacterException(f"{elem!r} is out of range")
        stack.append(value)

    if len(stack) != 1:
        raise InsufficientValuesException(f"expected one value after evaluation, got {len(stack)}")

    return stack[0]
