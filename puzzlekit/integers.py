"""Puzzles about single integers."""

from __future__ import annotations

import math


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def integer_sqrt(x: int) -> int:
    """Return the floor of the square root of ``x``, or 0 when ``x`` is negative."""
    if x <= 0:
        return 0
    return math.isqrt(x)


def count_set_bits(n: int) -> int:
    """Count the one bits of a positive integer; zero and negatives give 0."""
    if n <= 0:
        return 0
    return n.bit_count()


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while n != 1:
        if n in seen:
            return False
        seen.add(n)
        n = _digit_square_sum(n)
    return True


def minimize_xor(num1: int, num2: int) -> int:
    """Return the number with as many set bits as ``num2`` whose XOR with ``num1`` is smallest."""
    if num1 < 0 or num2 < 0:
        raise ValueError("minimize_xor expects non-negative integers")
    needed = count_set_bits(num2)
    result = 0

    # Keep the highest set bits of num1 first.
    for shift in reversed(range(num1.bit_length())):
        if needed and (num1 >> shift) & 1:
            result |= 1 << shift
            needed -= 1

    # Then fill the lowest clear bits within num1's width.
    width = max(num1.bit_length(), 1)
    for shift in range(width):
        if not needed:
            break
        if not (result >> shift) & 1:
            result |= 1 << shift
            needed -= 1

    # Any remaining bits extend the number on the low end.
    if needed:
        result = (result << needed) | ((1 << needed) - 1)
    return result