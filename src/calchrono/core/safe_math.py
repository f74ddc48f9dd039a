"""
calchrono.core.safe_math
------------------------
Overflow-checked integer arithmetic on the signed 64-bit range.

Python integers never wrap, so the checks here are explicit range tests on the
exact result. Every unit-scaling operation goes through these helpers so that
a large caller-supplied amount fails loudly instead of producing a value that
the rest of the time-value ecosystem cannot represent.
"""

from __future__ import annotations

from .errors import ArithmeticOverflowError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def _checked(value: int, a: int, op: str, b: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(f"Integer overflow: {a} {op} {b}")
    return value


def check_int64(value: int) -> int:
    """Return value unchanged if it lies in the signed 64-bit range."""
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(f"Value out of 64-bit range: {value}")
    return value


def safe_add(a: int, b: int) -> int:
    return _checked(a + b, a, "+", b)


def safe_subtract(a: int, b: int) -> int:
    return _checked(a - b, a, "-", b)


def safe_multiply(a: int, b: int) -> int:
    return _checked(a * b, a, "*", b)
