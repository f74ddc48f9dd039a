"""
calchrono.units.interfaces
--------------------------
Boundaries between a period unit (what a granularity is) and its rules
(how an amount of it is applied to, or measured between, date/time values).

Values are never mutated: every add returns a new value.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.time import LocalDateTime, LocalTime
from ..core.types import ChronoDate, Duration


@runtime_checkable
class PeriodRules(Protocol):
    def add_to_date(self, date: ChronoDate, amount: int) -> ChronoDate:
        """Adds `amount` units to a date-only value."""
        ...

    def add_to_time(self, time: LocalTime, amount: int) -> LocalTime:
        """Adds `amount` units to a time of day, wrapping at midnight."""
        ...

    def add_to_date_time(self, date_time: LocalDateTime, amount: int) -> LocalDateTime:
        """Adds `amount` units to a date-time, carrying whole days into the date."""
        ...

    def period_between_dates(self, start: ChronoDate, end: ChronoDate) -> int:
        """Whole units from start to end; negative when end is earlier."""
        ...

    def period_between_times(self, start: LocalTime, end: LocalTime) -> int:
        ...

    def period_between_date_times(self, start: LocalDateTime, end: LocalDateTime) -> int:
        ...


@runtime_checkable
class PeriodUnit(Protocol):
    @property
    def label(self) -> str:
        ...

    @property
    def duration(self) -> Duration:
        """Estimated length; descriptive only, never used for arithmetic."""
        ...

    @property
    def rules(self) -> PeriodRules:
        ...
