from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .errors import InvalidDateFieldError
from .types import ChronoDate, NANOS_PER_SECOND

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_DAY = 86400
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY

# Julian Day Number of 1970-01-01, i.e. epoch day 0.
JDN_UNIX_EPOCH = 2440588


def jdn_from_ymd(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) to Julian Day Number. Valid for any year with floor division."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_ymd (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def jdn_from_epoch_day(epoch_day: int) -> int:
    return epoch_day + JDN_UNIX_EPOCH


def epoch_day_from_jdn(jdn: int) -> int:
    return jdn - JDN_UNIX_EPOCH


def epoch_day_from_date(d: date) -> int:
    """Epoch day of a standard-library date."""
    return epoch_day_from_jdn(jdn_from_ymd(d.year, d.month, d.day))


def date_from_epoch_day(epoch_day: int) -> date:
    """Standard-library date of an epoch day (years 1..9999 only)."""
    return date(*ymd_from_jdn(jdn_from_epoch_day(epoch_day)))


# ============================================================
# Wall-clock value types
# ============================================================

@dataclass(frozen=True, order=True)
class LocalTime:
    """A time of day with nanosecond precision; arithmetic wraps at midnight."""
    hour: int
    minute: int
    second: int = 0
    nano: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hour < HOURS_PER_DAY):
            raise InvalidDateFieldError(f"Invalid value for HourOfDay: {self.hour}")
        if not (0 <= self.minute < MINUTES_PER_HOUR):
            raise InvalidDateFieldError(f"Invalid value for MinuteOfHour: {self.minute}")
        if not (0 <= self.second < SECONDS_PER_MINUTE):
            raise InvalidDateFieldError(f"Invalid value for SecondOfMinute: {self.second}")
        if not (0 <= self.nano < NANOS_PER_SECOND):
            raise InvalidDateFieldError(f"Invalid value for NanoOfSecond: {self.nano}")

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> "LocalTime":
        if not (0 <= nano_of_day < NANOS_PER_DAY):
            raise InvalidDateFieldError(f"Invalid value for NanoOfDay: {nano_of_day}")
        hour, rem = divmod(nano_of_day, NANOS_PER_HOUR)
        minute, rem = divmod(rem, NANOS_PER_MINUTE)
        second, nano = divmod(rem, NANOS_PER_SECOND)
        return cls(hour, minute, second, nano)

    @classmethod
    def parse(cls, text: str) -> "LocalTime":
        """Parse HH:MM[:SS[.fffffffff]]."""
        parts = text.split(":")
        if len(parts) not in (2, 3):
            raise InvalidDateFieldError(f"Cannot parse time '{text}'")
        sec_txt, frac = "0", ""
        if len(parts) == 3:
            sec_txt, _, frac = parts[2].partition(".")
        if frac and (len(frac) > 9 or not frac.isdigit()):
            raise InvalidDateFieldError(f"Cannot parse fraction in '{text}'")
        try:
            hour, minute, second = int(parts[0]), int(parts[1]), int(sec_txt)
        except ValueError as e:
            raise InvalidDateFieldError(f"Cannot parse time '{text}'") from e
        nano = int(frac.ljust(9, "0")) if frac else 0
        return cls(hour, minute, second, nano)

    def to_nano_of_day(self) -> int:
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nano
        )

    def plus_nanos(self, amount: int) -> "LocalTime":
        if amount == 0:
            return self
        return LocalTime.of_nano_of_day((self.to_nano_of_day() + amount) % NANOS_PER_DAY)

    def plus_seconds(self, amount: int) -> "LocalTime":
        return self.plus_nanos((amount % SECONDS_PER_DAY) * NANOS_PER_SECOND)

    def plus_minutes(self, amount: int) -> "LocalTime":
        return self.plus_nanos((amount % (MINUTES_PER_HOUR * HOURS_PER_DAY)) * NANOS_PER_MINUTE)

    def plus_hours(self, amount: int) -> "LocalTime":
        return self.plus_nanos((amount % HOURS_PER_DAY) * NANOS_PER_HOUR)

    def __str__(self) -> str:
        out = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nano:
            out += f".{self.nano:09d}"
        return out


MIDNIGHT = LocalTime(0, 0)
NOON = LocalTime(12, 0)


@dataclass(frozen=True)
class LocalDateTime:
    """
    A calendar date paired with a time of day.

    Unlike LocalTime, the plus_* methods carry whole days into the date, so
    adding 25 hours moves the date forward by one day.
    """
    date: ChronoDate
    time: LocalTime = MIDNIGHT

    def _plus_nanos_with_carry(self, nanos: int) -> "LocalDateTime":
        if nanos == 0:
            return self
        days, nano_of_day = divmod(self.time.to_nano_of_day() + nanos, NANOS_PER_DAY)
        return LocalDateTime(self.date.plus_days(days), LocalTime.of_nano_of_day(nano_of_day))

    def plus_nanos(self, amount: int) -> "LocalDateTime":
        return self._plus_nanos_with_carry(amount)

    def plus_seconds(self, amount: int) -> "LocalDateTime":
        return self._plus_nanos_with_carry(amount * NANOS_PER_SECOND)

    def plus_minutes(self, amount: int) -> "LocalDateTime":
        return self._plus_nanos_with_carry(amount * NANOS_PER_MINUTE)

    def plus_hours(self, amount: int) -> "LocalDateTime":
        return self._plus_nanos_with_carry(amount * NANOS_PER_HOUR)

    def to_epoch_day(self) -> int:
        return self.date.to_epoch_day()

    def __str__(self) -> str:
        return f"{self.date}T{self.time}"
