from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from .errors import InvalidDateFieldError
from .safe_math import safe_add

if TYPE_CHECKING:
    from .engine import Chronology

NANOS_PER_SECOND = 1_000_000_000


class ChronoField(Enum):
    ERA = "Era"
    YEAR = "Year"
    YEAR_OF_ERA = "YearOfEra"
    MONTH_OF_YEAR = "MonthOfYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    DAY_OF_WEEK = "DayOfWeek"
    EPOCH_DAY = "EpochDay"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueRange:
    """Static bounds of a field; smallest_maximum covers variable-length fields."""
    minimum: int
    maximum: int
    smallest_maximum: Optional[int] = None

    def is_valid(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check(self, value: int, field: ChronoField) -> int:
        if not self.is_valid(value):
            raise InvalidDateFieldError(f"Invalid value for {field}: {value} (valid values {self})")
        return value

    def __str__(self) -> str:
        if self.smallest_maximum is not None and self.smallest_maximum != self.maximum:
            return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"
        return f"{self.minimum} - {self.maximum}"


@dataclass(frozen=True)
class Duration:
    """Seconds plus a nanosecond remainder, normalized (floored) into [0, 10^9)."""
    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        carry, rem = divmod(self.nanos, NANOS_PER_SECOND)
        if carry:
            object.__setattr__(self, "seconds", self.seconds + carry)
            object.__setattr__(self, "nanos", rem)

    @classmethod
    def of_nanos(cls, nanos: int) -> "Duration":
        secs, rem = divmod(nanos, NANOS_PER_SECOND)
        return cls(secs, rem)

    @classmethod
    def of_millis(cls, millis: int) -> "Duration":
        return cls.of_nanos(millis * 1_000_000)

    @classmethod
    def of_seconds(cls, seconds: int) -> "Duration":
        return cls(seconds, 0)

    def to_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos


@total_ordering
@dataclass(frozen=True)
class ChronoDate:
    """
    A date in one calendar system, stored as (proleptic year, month, day).

    Instances are validated on construction by their chronology, so an
    invalid ChronoDate is never observable. Build them through the
    chronology factories (`date`, `date_year_day`, `date_from_epoch_day`).
    """
    chronology: "Chronology"
    proleptic_year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        self.chronology.check_fields(self.proleptic_year, self.month, self.day)

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def era(self) -> Enum:
        return self.chronology.era_and_year_of_era(self.proleptic_year)[0]

    @property
    def year_of_era(self) -> int:
        return self.chronology.era_and_year_of_era(self.proleptic_year)[1]

    @property
    def is_leap_year(self) -> bool:
        return self.chronology.is_leap_year(self.proleptic_year)

    @property
    def length_of_month(self) -> int:
        return self.chronology.length_of_month(self.proleptic_year, self.month)

    @property
    def length_of_year(self) -> int:
        return self.chronology.length_of_year(self.proleptic_year)

    @property
    def day_of_year(self) -> int:
        return self.chronology.day_of_year(self.proleptic_year, self.month, self.day)

    @property
    def day_of_week(self) -> int:
        """ISO day of week, 1=Monday..7=Sunday (epoch day 0 is a Thursday)."""
        return (self.to_epoch_day() + 3) % 7 + 1

    def to_epoch_day(self) -> int:
        return self.chronology.epoch_day_from_fields(self.proleptic_year, self.month, self.day)

    # ---------------------------------------------------------
    # Arithmetic and conversion (always new values)
    # ---------------------------------------------------------

    def plus_days(self, days: int) -> "ChronoDate":
        if days == 0:
            return self
        return self.chronology.date_from_epoch_day(safe_add(self.to_epoch_day(), days))

    def with_chronology(self, other: "Chronology") -> "ChronoDate":
        return other.date_from(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate) or other.chronology != self.chronology:
            return NotImplemented
        return (self.proleptic_year, self.month, self.day) < (other.proleptic_year, other.month, other.day)

    def __str__(self) -> str:
        era, yoe = self.chronology.era_and_year_of_era(self.proleptic_year)
        return f"{self.chronology.id} {era.name} {yoe:04d}-{self.month:02d}-{self.day:02d}"
