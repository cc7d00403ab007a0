"""Conversion of infix arithmetic expressions to postfix notation."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from dslabs.stack import Stack

_PRIORITIES = {"(": 1, ")": 1, "+": 2, "-": 2, "*": 3, "/": 3}


def priority(char: str) -> int:
    """Precedence of ``char``: parentheses lowest, then +/-, then * and /; 0 otherwise."""
    return _PRIORITIES.get(char, 0)


def to_postfix(expression: str) -> str:
    """Convert ``expression`` to postfix; every non-operator character is an operand."""
    stack = Stack()
    output: list[str] = []
    for char in expression:
        if char == "(":
            stack.push(char)
        elif char == ")":
            while True:
                if stack.is_empty():
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif priority(char) > 1:
            while not stack.is_empty() and priority(stack.peek()) >= priority(char):
                output.append(stack.pop())
            stack.push(char)
        else:
            output.append(char)
    while not stack.is_empty():
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(top)
    return "".join(output)


def _convert_all(expressions: Iterable[str]) -> int:
    status = 0
    for expression in expressions:
        try:
            print(to_postfix(expression))
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert expressions given as arguments, or one per line of standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        return _convert_all(args)
    return _convert_all(line.rstrip("\r\n") for line in sys.stdin)


if __name__ == "__main__":
    sys.exit(main())