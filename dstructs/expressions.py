"""Infix to postfix conversion and postfix evaluation using a stack."""

from __future__ import annotations

import argparse
from typing import Sequence

from dstructs.stack import Stack

_ARITHMETIC_OPERATORS = "+-*/"
_BOOLEAN_OPERATORS = "!&|"
_BOOLEAN_OPERANDS = "VF"

_PRIORITIES = {
    "(": 0,
    "+": 1,
    "-": 1,
    "|": 1,
    "&": 1,
    "*": 2,
    "/": 2,
    "!": 2,
}


def priority(operator: str) -> int:
    """Return the precedence of an operator, or -1 for an unknown one."""
    return _PRIORITIES.get(operator, -1)


def to_postfix_parenthesized(expression: str) -> str:
    """Convert a fully parenthesized arithmetic expression to postfix.

    Digits are copied, operators are stacked, and each closing parenthesis
    emits the most recently stacked operator. Other characters are ignored.
    """
    stack = Stack(len(expression))
    output = []
    for char in expression:
        if char.isdigit():
            output.append(char)
        elif char in _ARITHMETIC_OPERATORS:
            stack.push(char)
        elif char == ")":
            output.append(stack.pop())
    return "".join(output)


def to_postfix(expression: str) -> str:
    """Convert an infix arithmetic expression to postfix honouring precedence."""
    stack = Stack(len(expression))
    output = []
    for char in expression:
        if char == "(":
            stack.push(char)
        elif char.isdigit():
            output.append(char)
        elif char in _ARITHMETIC_OPERATORS:
            while not stack.is_empty() and priority(stack.top()) >= priority(char):
                output.append(stack.pop())
            stack.push(char)
        elif char == ")":
            while stack.top() != "(":
                output.append(stack.pop())
            stack.pop()
    while not stack.is_empty():
        output.append(stack.pop())
    return "".join(output)


def _truncating_division(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and + - * /.

    Division truncates toward zero.
    """
    stack = Stack(len(expression))
    for char in expression:
        if char.isdigit():
            stack.push(int(char))
            continue
        if char not in _ARITHMETIC_OPERATORS:
            raise ValueError(f"unexpected character {char!r} in postfix expression")
        right = stack.pop()
        left = stack.pop()
        if char == "+":
            stack.push(left + right)
        elif char == "-":
            stack.push(left - right)
        elif char == "*":
            stack.push(left * right)
        else:
            stack.push(_truncating_division(left, right))
    return stack.pop()


def boolean_to_postfix(expression: str) -> str:
    """Convert a fully parenthesized boolean expression over V and F to postfix."""
    stack = Stack(len(expression))
    output = []
    for char in expression:
        if char in _BOOLEAN_OPERANDS:
            output.append(char)
        elif char in _BOOLEAN_OPERATORS:
            stack.push(char)
        elif char == ")":
            output.append(stack.pop())
    return "".join(output)


def evaluate_boolean_postfix(expression: str) -> bool:
    """Evaluate a postfix boolean expression over V, F and the operators ! & |."""
    stack = Stack(len(expression))
    for char in expression:
        if char in _BOOLEAN_OPERANDS:
            stack.push(char == "V")
            continue
        if char not in _BOOLEAN_OPERATORS:
            raise ValueError(f"unexpected character {char!r} in postfix expression")
        operand = stack.pop()
        if char == "!":
            stack.push(not operand)
        elif char == "&":
            left = stack.pop()
            stack.push(left and operand)
        else:
            left = stack.pop()
            stack.push(left or operand)
    return stack.pop()


def main(argv: Sequence[str] | None = None) -> int:
    """Read an infix expression, print its postfix form and its value."""
    parser = argparse.ArgumentParser(
        description="Convert an infix expression to postfix and evaluate it."
    )
    parser.add_argument("expression", nargs="?", help="infix expression")
    parser.add_argument(
        "--boolean",
        action="store_true",
        help="treat the expression as a parenthesized boolean one over V and F",
    )
    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        expression = input("Infixa? ")

    if args.boolean:
        postfix = boolean_to_postfix(expression)
        value = "V" if evaluate_boolean_postfix(postfix) else "F"
    else:
        postfix = to_postfix(expression)
        value = str(evaluate_postfix(postfix))

    print(f"Posfixa: {postfix}")
    print(f"valor: {value}")
    return 0