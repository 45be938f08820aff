"""Boolean expressions over the operators ``!``, ``&`` and ``|``.

Operands are single decimal digits; evaluation goes through a postfix
form built with the shunting-yard algorithm.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MAX_STACK_SIZE = 100

OPERATORS = frozenset("!&|")
_DIGITS = frozenset("0123456789")
_PRECEDENCE = {"!": 3, "&": 2, "|": 1}


class ExpressionError(ValueError):
    """Raised for a malformed boolean expression."""


def tokenize(expr: str) -> list[str]:
    """Split an expression into one-character tokens, dropping spaces and quotes."""
    return [ch for ch in expr if ch not in ' "']


def precedence(op: str) -> int:
    """Return the binding strength of a logical operator."""
    try:
        return _PRECEDENCE[op]
    except KeyError:
        raise ExpressionError(f"Unknown operator found: {op}") from None


def to_postfix(tokens: Iterable[str]) -> list[str]:
    """Convert infix tokens to postfix order.

    Digits become operands; tokens that are neither digits, parentheses
    nor operators are ignored.
    """
    operators: list[str] = []
    output: list[str] = []
    for token in tokens:
        if token in _DIGITS:
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            if not operators:
                raise ExpressionError("Mismatch in parenthesis found")
            while operators[-1] != "(":
                output.append(operators.pop())
                if not operators:
                    raise ExpressionError("Mismatch in parenthesis found")
            operators.pop()
        elif token in OPERATORS:
            while (
                operators
                and operators[-1] != "("
                and precedence(operators[-1]) > precedence(token)
            ):
                output.append(operators.pop())
            operators.append(token)
    output.extend(reversed(operators))
    return output


def evaluate_postfix(postfix: Iterable[str]) -> int:
    """Evaluate a postfix expression and return its value."""
    stack: list[int] = []

    def push(value: int) -> None:
        if len(stack) >= MAX_STACK_SIZE:
            raise ExpressionError("Stack capacity exceeded")
        stack.append(value)

    for token in postfix:
        if token in _DIGITS:
            push(int(token))
        elif token == "!":
            if not stack:
                raise ExpressionError("Operator '!' needs one operand")
            push(int(not stack.pop()))
        elif token == "&" or token == "|":
            if len(stack) < 2:
                raise ExpressionError(f"Operator '{token}' needs two operands")
            right = stack.pop()
            left = stack.pop()
            if token == "&":
                push(int(bool(left) and bool(right)))
            else:
                push(int(bool(left) or bool(right)))
        else:
            raise ExpressionError(f"Unknown token found: {token}")

    if len(stack) != 1:
        raise ExpressionError("Expression does not reduce to a single value")
    return stack[0]


def evaluate(tokens: Sequence[str]) -> int:
    """Evaluate infix tokens whose operands are digits."""
    return evaluate_postfix(to_postfix(tokens))