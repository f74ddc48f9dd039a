# tests/test_safe_math.py

import pytest

from calchrono.core.errors import ArithmeticOverflowError
from calchrono.core.safe_math import (
    INT64_MAX,
    INT64_MIN,
    check_int64,
    safe_add,
    safe_multiply,
    safe_subtract,
)


def test_multiply_in_range():
    assert safe_multiply(1000, 1000) == 1_000_000
    assert safe_multiply(-7, 12) == -84
    assert safe_multiply(INT64_MAX, 1) == INT64_MAX


def test_multiply_overflow():
    with pytest.raises(ArithmeticOverflowError):
        safe_multiply(INT64_MAX, 2)
    with pytest.raises(ArithmeticOverflowError):
        safe_multiply(INT64_MIN, -1)


def test_add_subtract_edges():
    assert safe_add(-5, 3) == -2
    assert safe_add(INT64_MAX - 1, 1) == INT64_MAX
    assert safe_subtract(INT64_MIN + 1, 1) == INT64_MIN
    with pytest.raises(ArithmeticOverflowError):
        safe_add(INT64_MAX, 1)
    with pytest.raises(ArithmeticOverflowError):
        safe_subtract(INT64_MIN, 1)


def test_overflow_is_also_builtin_overflow_error():
    with pytest.raises(OverflowError):
        safe_multiply(INT64_MAX, INT64_MAX)


def test_check_int64_bounds():
    assert check_int64(INT64_MIN) == INT64_MIN
    assert check_int64(INT64_MAX) == INT64_MAX
    with pytest.raises(ArithmeticOverflowError):
        check_int64(INT64_MAX + 1)
