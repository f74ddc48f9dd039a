"""
calchrono.units.time_unit
-------------------------
The fixed set of sub-day period units and their rules.

Adding
    Amounts are scaled to the unit the value type understands (nanos, seconds,
    minutes, hours) with overflow-checked multiplication, so MICROS scales by
    1000 and HALF_DAYS by 12 hours.

    A date-only value has no time of day to absorb a sub-day amount, so
    `add_to_date` returns the date unchanged for every unit here. Callers that
    need 25 hours to move the date must use a LocalDateTime.

Measuring
    The result is the exact elapsed time divided by the unit length, truncated
    toward zero: the sign gives the direction and the magnitude counts whole
    units only.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, TypeVar

from ..core.errors import UnknownUnitError
from ..core.safe_math import check_int64, safe_add, safe_multiply, safe_subtract
from ..core.time import NANOS_PER_DAY, LocalDateTime, LocalTime
from ..core.types import ChronoDate, Duration

_T = TypeVar("_T", LocalTime, LocalDateTime)


def _div_toward_zero(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


class TimeUnit(Enum):
    NANOS = ("Nanos", 1)
    MICROS = ("Micros", 1_000)
    MILLIS = ("Millis", 1_000_000)
    SECONDS = ("Seconds", 1_000_000_000)
    MINUTES = ("Minutes", 60 * 1_000_000_000)
    HOURS = ("Hours", 3600 * 1_000_000_000)
    HALF_DAYS = ("HalfDays", 43200 * 1_000_000_000)

    def __init__(self, label: str, unit_nanos: int):
        self.label = label
        self.unit_nanos = unit_nanos

    @property
    def duration(self) -> Duration:
        return Duration.of_nanos(self.unit_nanos)

    @property
    def rules(self) -> "TimeUnitRules":
        return _RULES[self]

    @property
    def units_per_day(self) -> int:
        return NANOS_PER_DAY // self.unit_nanos

    @classmethod
    def of_name(cls, name: str) -> "TimeUnit":
        key = name.strip().lower().replace("_", "")
        for unit in cls:
            if key in (unit.label.lower(), unit.name.lower().replace("_", "")):
                return unit
        raise UnknownUnitError(f"Unknown unit '{name}'. Available: {[u.label for u in cls]}")

    def __str__(self) -> str:
        return self.label


class TimeUnitRules:
    """Arithmetic for one TimeUnit. Stateless apart from the bound unit."""

    __slots__ = ("unit",)

    def __init__(self, unit: TimeUnit):
        self.unit = unit

    def _add(self, value: _T, amount: int) -> _T:
        check_int64(amount)
        unit = self.unit
        if unit is TimeUnit.NANOS:
            return value.plus_nanos(amount)
        if unit is TimeUnit.MICROS:
            return value.plus_nanos(safe_multiply(amount, 1_000))
        if unit is TimeUnit.MILLIS:
            return value.plus_nanos(safe_multiply(amount, 1_000_000))
        if unit is TimeUnit.SECONDS:
            return value.plus_seconds(amount)
        if unit is TimeUnit.MINUTES:
            return value.plus_minutes(amount)
        if unit is TimeUnit.HOURS:
            return value.plus_hours(amount)
        if unit is TimeUnit.HALF_DAYS:
            return value.plus_hours(safe_multiply(amount, 12))
        raise UnknownUnitError(f"Unknown unit: {unit!r}")

    def add_to_date(self, date: ChronoDate, amount: int) -> ChronoDate:
        # Sub-day units never change a date-only value; see module docstring.
        check_int64(amount)
        return date

    def add_to_time(self, time: LocalTime, amount: int) -> LocalTime:
        return self._add(time, amount)

    def add_to_date_time(self, date_time: LocalDateTime, amount: int) -> LocalDateTime:
        return self._add(date_time, amount)

    def period_between_dates(self, start: ChronoDate, end: ChronoDate) -> int:
        days = safe_subtract(end.to_epoch_day(), start.to_epoch_day())
        return safe_multiply(days, self.unit.units_per_day)

    def period_between_times(self, start: LocalTime, end: LocalTime) -> int:
        return _div_toward_zero(end.to_nano_of_day() - start.to_nano_of_day(), self.unit.unit_nanos)

    def period_between_date_times(self, start: LocalDateTime, end: LocalDateTime) -> int:
        days = safe_subtract(end.to_epoch_day(), start.to_epoch_day())
        nanos = end.time.to_nano_of_day() - start.time.to_nano_of_day()
        # make days and nanos share a sign so each part truncates the same way
        if days > 0 and nanos < 0:
            days -= 1
            nanos += NANOS_PER_DAY
        elif days < 0 and nanos > 0:
            days += 1
            nanos -= NANOS_PER_DAY
        whole = safe_multiply(days, self.unit.units_per_day)
        return safe_add(whole, _div_toward_zero(nanos, self.unit.unit_nanos))

    def __repr__(self) -> str:
        return f"TimeUnitRules({self.unit.label})"


_RULES: Dict[TimeUnit, TimeUnitRules] = {u: TimeUnitRules(u) for u in TimeUnit}
