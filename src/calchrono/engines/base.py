"""
calchrono.engines.base
----------------------
Behaviour shared by every chronology: era resolution for the two-era layout,
field validation, year-day construction and "now". Subclasses supply the
conversion kernel (epoch_day_from_fields / fields_from_epoch_day), the leap
rule and month lengths.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from ..core.errors import InvalidDateFieldError, InvalidEraError, InvalidEraValueError
from ..core.safe_math import check_int64
from ..core.types import ChronoDate, ChronoField, ValueRange
from .clock import Clock, clock_epoch_day, resolve_clock


class BaseChronology:
    """
    Stateless calendar system. Instances hold only immutable parameters and
    precomputed tables, so a single instance is shared process-wide.
    """
    id: str = ""
    calendar_type: str = ""
    era_type: Type[Enum]
    months_per_year: int = 12
    p: Any

    def __init__(self, ranges: Dict[ChronoField, ValueRange]):
        self._ranges = dict(ranges)

    # ---------------------------------------------------------
    # Kernel (implemented per calendar system)
    # ---------------------------------------------------------

    def epoch_day_from_fields(self, proleptic_year: int, month: int, day: int) -> int:
        raise NotImplementedError

    def fields_from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        raise NotImplementedError

    def is_leap_year(self, proleptic_year: int) -> bool:
        raise NotImplementedError

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        raise NotImplementedError

    def length_of_year(self, proleptic_year: int) -> int:
        raise NotImplementedError

    def day_of_year(self, proleptic_year: int, month: int, day: int) -> int:
        return self.epoch_day_from_fields(proleptic_year, month, day) - self.epoch_day_from_fields(proleptic_year, 1, 1) + 1

    # ---------------------------------------------------------
    # Eras
    # ---------------------------------------------------------

    @property
    def era_before(self) -> Enum:
        return self.era_type(0)

    @property
    def era_current(self) -> Enum:
        return self.era_type(1)

    def eras(self) -> List[Enum]:
        return list(self.era_type)

    def era_of(self, value: int) -> Enum:
        try:
            return self.era_type(value)
        except ValueError:
            raise InvalidEraValueError(f"Invalid {self.id} era: {value}") from None

    def proleptic_year(self, era: Enum, year_of_era: int) -> int:
        if not isinstance(era, self.era_type):
            raise InvalidEraError(f"Era must be {self.era_type.__name__}, got {era!r}")
        self.range(ChronoField.YEAR_OF_ERA).check(year_of_era, ChronoField.YEAR_OF_ERA)
        return year_of_era if era is self.era_current else 1 - year_of_era

    def era_and_year_of_era(self, proleptic_year: int) -> Tuple[Enum, int]:
        if proleptic_year >= 1:
            return self.era_current, proleptic_year
        return self.era_before, 1 - proleptic_year

    def range(self, field: ChronoField) -> ValueRange:
        return self._ranges[field]

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def check_fields(self, proleptic_year: int, month: int, day: int) -> None:
        self.range(ChronoField.YEAR).check(proleptic_year, ChronoField.YEAR)
        self.range(ChronoField.MONTH_OF_YEAR).check(month, ChronoField.MONTH_OF_YEAR)
        dom = self.length_of_month(proleptic_year, month)
        if not (1 <= day <= dom):
            raise InvalidDateFieldError(
                f"Invalid value for {ChronoField.DAY_OF_MONTH}: {day} "
                f"({self.id} {proleptic_year}-{month:02d} has {dom} days)"
            )

    def _resolve_year(self, year: int, era: Optional[Enum]) -> int:
        return year if era is None else self.proleptic_year(era, year)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day: int, *, era: Optional[Enum] = None) -> ChronoDate:
        """
        Date from fields. Without `era`, `year` is the proleptic year;
        with it, `year` is the year-of-era.
        """
        return ChronoDate(self, self._resolve_year(year, era), month, day)

    def date_year_day(self, year: int, day_of_year: int, *, era: Optional[Enum] = None) -> ChronoDate:
        prolep = self._resolve_year(year, era)
        first = self.date(prolep, 1, 1)
        if not (1 <= day_of_year <= self.length_of_year(prolep)):
            raise InvalidDateFieldError(
                f"Invalid value for {ChronoField.DAY_OF_YEAR}: {day_of_year} "
                f"({self.id} year {prolep} has {self.length_of_year(prolep)} days)"
            )
        return first.plus_days(day_of_year - 1)

    def date_from_epoch_day(self, epoch_day: int) -> ChronoDate:
        self.range(ChronoField.EPOCH_DAY).check(check_int64(epoch_day), ChronoField.EPOCH_DAY)
        y, m, d = self.fields_from_epoch_day(epoch_day)
        return ChronoDate(self, y, m, d)

    def date_from(self, other: ChronoDate) -> ChronoDate:
        if other.chronology == self:
            return other
        return self.date_from_epoch_day(other.to_epoch_day())

    def date_now(self, clock: Optional[Union[Clock, int]] = None) -> ChronoDate:
        return self.date_from_epoch_day(clock_epoch_day(resolve_clock(clock)))

    # ---------------------------------------------------------
    # Identity
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "calendar_type": self.calendar_type,
            "eras": [e.name for e in self.eras()],
            "ranges": {str(f): str(r) for f, r in self._ranges.items()},
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseChronology):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id and self.p == other.p

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id, self.p))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"
