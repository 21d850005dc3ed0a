"""Stack-based puzzles: postfix evaluation and a stack that tracks its minimum."""

from __future__ import annotations

import operator
from typing import Callable, Iterable


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("no expression to evaluate")
    return stack[-1]


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current_min = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, current_min))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._entries:
            raise IndexError("pop from empty MinStack")
        return self._entries.pop()[0]

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._entries:
            raise IndexError("top of empty MinStack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty MinStack")
        return self._entries[-1][1]