"""Small number puzzles on integers."""

from __future__ import annotations

import math

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _signed_digits(n: int) -> list[int]:
    """Decimal digits of ``n`` from least significant, carrying the sign of ``n``."""
    sign = -1 if n < 0 else 1
    return [sign * int(c) for c in reversed(str(abs(n)))] if n else []


def add_digits(num: int) -> int:
    """Repeatedly sum digits until one digit is left (the digital root)."""
    if num == 0:
        return 0
    return num % 9 or 9


def count_digits(num: int) -> int:
    """Count the digits of ``num`` that divide it; a zero digit raises ZeroDivisionError."""
    return sum(1 for digit in _signed_digits(num) if num % digit == 0)


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number."""
    letters = []
    while column_number > 0:
        column_number, offset = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + offset))
    return "".join(reversed(letters))


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal form of ``x`` reads the same both ways."""
    if x < 0 or (x != 0 and x % 10 == 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        x, digit = divmod(x, 10)
        reversed_half = reversed_half * 10 + digit
    return x == reversed_half or x == reversed_half // 10


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n >= 1 and n & (n - 1) == 0


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT32_MIN <= result <= INT32_MAX else 0


def my_sqrt(x: int) -> int:
    """Integer square root, rounded down; 0 for negative input."""
    return math.isqrt(x) if x > 0 else 0


def subtract_product_and_sum(n: int) -> int:
    """Product of the digits of ``n`` minus their sum."""
    digits = _signed_digits(n)
    return math.prod(digits) - sum(digits)