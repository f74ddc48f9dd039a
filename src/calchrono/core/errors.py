class CalchronoError(Exception):
    """Base error."""

class InvalidEraError(CalchronoError, ValueError):
    """Raised when an era does not belong to the chronology it is used with."""

class InvalidEraValueError(CalchronoError, ValueError):
    """Raised when a numeric era ordinal is outside the chronology's era set."""

class InvalidDateFieldError(CalchronoError, ValueError):
    """Raised when a month, day, day-of-year or year is out of range."""

class ArithmeticOverflowError(CalchronoError, OverflowError):
    """Raised when a result does not fit in a signed 64-bit integer."""

class UnknownUnitError(CalchronoError, LookupError):
    """Raised when a period unit cannot be dispatched."""
