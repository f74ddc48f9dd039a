"""calchrono public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_chronologies,
    get_chronology,
    chronology_info,
    date_of,
    date_from_epoch_day,
    date_now,
    convert,
    is_leap_year,
    date_attributes,
    add,
    between,
)
from .core.errors import (
    CalchronoError,
    InvalidEraError,
    InvalidEraValueError,
    InvalidDateFieldError,
    ArithmeticOverflowError,
    UnknownUnitError,
)
from .core.safe_math import safe_add, safe_subtract, safe_multiply
from .core.time import LocalTime, LocalDateTime
from .core.types import ChronoDate, ChronoField, Duration, ValueRange
from .engines.clock import FixedClock, SystemClock
from .engines.hijrah import HijrahEra
from .engines.iso import IsoEra
from .units.time_unit import TimeUnit

ISO = get_chronology("iso")
HIJRAH = get_chronology("hijrah")

__all__ = [
    "list_chronologies",
    "get_chronology",
    "chronology_info",
    "date_of",
    "date_from_epoch_day",
    "date_now",
    "convert",
    "is_leap_year",
    "date_attributes",
    "add",
    "between",
    "CalchronoError",
    "InvalidEraError",
    "InvalidEraValueError",
    "InvalidDateFieldError",
    "ArithmeticOverflowError",
    "UnknownUnitError",
    "safe_add",
    "safe_subtract",
    "safe_multiply",
    "LocalTime",
    "LocalDateTime",
    "ChronoDate",
    "ChronoField",
    "Duration",
    "ValueRange",
    "FixedClock",
    "SystemClock",
    "HijrahEra",
    "IsoEra",
    "TimeUnit",
    "ISO",
    "HIJRAH",
]
