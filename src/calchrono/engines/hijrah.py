"""
calchrono.engines.hijrah
------------------------
Tabular (arithmetic) Islamic calendar.

The calendar repeats every 30 proleptic years. Odd months have 30 days and
even months 29, except that month 12 gains a 30th day in the 11 leap years
of each cycle, so a cycle holds 30 * 354 + 11 = 10631 days.

Year y sits at zero-based index z = y - 1. With (c, r) = divmod(z, 30):
    epoch_day(y, m, d) = epoch + c * 10631 + YS[r] + MS[m - 1] + (d - 1)
where YS[r] counts the days of the r completed years of the cycle and MS is
the month-start table. Python's divmod floors, so years before AH 1 (and
epoch days before the epoch) land in negative cycles with a non-negative
offset, and the inverse below is exact on both sides of the origin.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from ..core.types import ChronoField, ValueRange
from .base import BaseChronology


class HijrahEra(Enum):
    BEFORE_AH = 0
    AH = 1


@dataclass(frozen=True)
class HijrahParams:
    """
    epoch_day: epoch day of 1 Muharram AH 1.
    leap_residues: values of (year mod cycle_years) whose 12th month has 30 days.
    """
    epoch_day: int
    cycle_years: int
    cycle_days: int
    leap_residues: FrozenSet[int]
    max_year_of_era: int

    def __post_init__(self) -> None:
        if self.cycle_years <= 0:
            raise ValueError("cycle_years must be positive")
        if not all(0 <= r < self.cycle_years for r in self.leap_residues):
            raise ValueError("leap residues must be in 0..cycle_years-1")
        if self.cycle_days != 354 * self.cycle_years + len(self.leap_residues):
            raise ValueError(
                f"cycle_days={self.cycle_days} inconsistent with "
                f"{self.cycle_years} years and {len(self.leap_residues)} leap days"
            )
        if self.max_year_of_era < 1:
            raise ValueError("max_year_of_era must be >= 1")


def month_length(month: int, leap: bool) -> int:
    if month == 12:
        return 30 if leap else 29
    return 30 if month % 2 == 1 else 29


class HijrahChronology(BaseChronology):
    id = "Hijrah"
    calendar_type = "islamicc"
    era_type = HijrahEra

    def __init__(self, params: HijrahParams):
        self.p = params

        # Month-start offsets within a year (identical for leap and common years).
        starts = [0]
        for m in range(1, 12):
            starts.append(starts[-1] + month_length(m, False))
        self._month_starts: Tuple[int, ...] = tuple(starts)

        # Year-start offsets within a cycle, indexed by completed years 0..cycle_years.
        ys = [0]
        for k in range(1, params.cycle_years + 1):
            ys.append(ys[-1] + self._year_length(k))
        if ys[-1] != params.cycle_days:
            raise ValueError(f"cycle sums to {ys[-1]} days, expected {params.cycle_days}")
        self._year_starts: Tuple[int, ...] = tuple(ys)

        year_min = 1 - params.max_year_of_era
        year_max = params.max_year_of_era
        ranges: Dict[ChronoField, ValueRange] = {
            ChronoField.ERA: ValueRange(0, 1),
            ChronoField.YEAR: ValueRange(year_min, year_max),
            ChronoField.YEAR_OF_ERA: ValueRange(1, params.max_year_of_era),
            ChronoField.MONTH_OF_YEAR: ValueRange(1, 12),
            ChronoField.DAY_OF_MONTH: ValueRange(1, 30, smallest_maximum=29),
            ChronoField.DAY_OF_YEAR: ValueRange(1, 355, smallest_maximum=354),
            ChronoField.DAY_OF_WEEK: ValueRange(1, 7),
            ChronoField.EPOCH_DAY: ValueRange(
                self.epoch_day_from_fields(year_min, 1, 1),
                self.epoch_day_from_fields(year_max, 12, self._year_length(year_max) - 325),
            ),
        }
        super().__init__(ranges)

    # ---------------------------------------------------------
    # Leap rule and lengths
    # ---------------------------------------------------------

    def _is_leap(self, y: int) -> bool:
        return (y % self.p.cycle_years) in self.p.leap_residues

    def _year_length(self, y: int) -> int:
        return 355 if self._is_leap(y) else 354

    def is_leap_year(self, proleptic_year: int) -> bool:
        return self._is_leap(proleptic_year)

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        return month_length(month, self._is_leap(proleptic_year))

    def length_of_year(self, proleptic_year: int) -> int:
        return self._year_length(proleptic_year)

    def day_of_year(self, proleptic_year: int, month: int, day: int) -> int:
        return self._month_starts[month - 1] + day

    # ---------------------------------------------------------
    # Conversion kernel
    # ---------------------------------------------------------

    def epoch_day_from_fields(self, proleptic_year: int, month: int, day: int) -> int:
        cycle, offset = divmod(proleptic_year - 1, self.p.cycle_years)
        days = cycle * self.p.cycle_days + self._year_starts[offset]
        days += self._month_starts[month - 1] + (day - 1)
        return days + self.p.epoch_day

    def fields_from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        cycle, rem = divmod(epoch_day - self.p.epoch_day, self.p.cycle_days)
        # rem < cycle_days == _year_starts[-1], so offset lands in 0..cycle_years-1
        offset = bisect_right(self._year_starts, rem) - 1
        year = cycle * self.p.cycle_years + offset + 1
        doy0 = rem - self._year_starts[offset]
        month = bisect_right(self._month_starts, doy0)
        day = doy0 - self._month_starts[month - 1] + 1
        return year, month, day

    def cycle_table(self) -> Tuple[Tuple[int, bool, int, int], ...]:
        """Rows of (year in cycle, leap, year length, days before year) for one cycle."""
        return tuple(
            (k, self._is_leap(k), self._year_length(k), self._year_starts[k - 1])
            for k in range(1, self.p.cycle_years + 1)
        )
