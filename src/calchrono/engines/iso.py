"""
calchrono.engines.iso
---------------------
The ISO-8601 calendar: proleptic Gregorian with a BCE/CE era split and an
astronomical year zero (year 0 is 1 BCE).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..core.time import epoch_day_from_jdn, jdn_from_epoch_day, jdn_from_ymd, ymd_from_jdn
from ..core.types import ChronoField, ValueRange
from .base import BaseChronology

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


class IsoEra(Enum):
    BCE = 0
    CE = 1


@dataclass(frozen=True)
class IsoParams:
    year_min: int = -999_999_999
    year_max: int = 999_999_999

    def __post_init__(self) -> None:
        if not (self.year_min < 1 <= self.year_max):
            raise ValueError("year range must straddle year 1")


def is_gregorian_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


class IsoChronology(BaseChronology):
    id = "ISO"
    calendar_type = "iso8601"
    era_type = IsoEra

    def __init__(self, params: IsoParams):
        self.p = params
        epoch_min = epoch_day_from_jdn(jdn_from_ymd(params.year_min, 1, 1))
        epoch_max = epoch_day_from_jdn(jdn_from_ymd(params.year_max, 12, 31))
        ranges: Dict[ChronoField, ValueRange] = {
            ChronoField.ERA: ValueRange(0, 1),
            ChronoField.YEAR: ValueRange(params.year_min, params.year_max),
            ChronoField.YEAR_OF_ERA: ValueRange(1, max(params.year_max, 1 - params.year_min)),
            ChronoField.MONTH_OF_YEAR: ValueRange(1, 12),
            ChronoField.DAY_OF_MONTH: ValueRange(1, 31, smallest_maximum=28),
            ChronoField.DAY_OF_YEAR: ValueRange(1, 366, smallest_maximum=365),
            ChronoField.DAY_OF_WEEK: ValueRange(1, 7),
            ChronoField.EPOCH_DAY: ValueRange(epoch_min, epoch_max),
        }
        super().__init__(ranges)

    def is_leap_year(self, proleptic_year: int) -> bool:
        return is_gregorian_leap(proleptic_year)

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        if month == 2 and is_gregorian_leap(proleptic_year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def length_of_year(self, proleptic_year: int) -> int:
        return 366 if is_gregorian_leap(proleptic_year) else 365

    def day_of_year(self, proleptic_year: int, month: int, day: int) -> int:
        leap_day = 1 if month > 2 and is_gregorian_leap(proleptic_year) else 0
        return _DAYS_BEFORE_MONTH[month - 1] + leap_day + day

    def epoch_day_from_fields(self, proleptic_year: int, month: int, day: int) -> int:
        return epoch_day_from_jdn(jdn_from_ymd(proleptic_year, month, day))

    def fields_from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        return ymd_from_jdn(jdn_from_epoch_day(epoch_day))
