from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes.registry import compute_attributes
from .core.engine import Chronology, ChronologyRegistry
from .core.time import LocalDateTime, LocalTime
from .core.types import ChronoDate
from .units.interfaces import PeriodRules
from .units.time_unit import TimeUnit

ChronologyLike = Union[str, Chronology]
UnitLike = Union[str, TimeUnit]

_registry: Optional[ChronologyRegistry] = None

def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Chronology registry not initialized")
    return _registry

def _chrono(chronology: ChronologyLike) -> Chronology:
    if isinstance(chronology, str):
        return _reg().get(chronology)
    return chronology

def _rules(unit: UnitLike) -> PeriodRules:
    return (unit if isinstance(unit, TimeUnit) else TimeUnit.of_name(unit)).rules

# ============================================================
# Chronologies
# ============================================================

def list_chronologies() -> List[str]:
    return _reg().list()

def get_chronology(name: str) -> Chronology:
    return _reg().get(name)

def chronology_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def date_of(
    chronology: ChronologyLike,
    year: int,
    month: int,
    day: int,
    *,
    era: Union[Enum, int, None] = None,
) -> ChronoDate:
    """Build a date; with `era`, `year` is read as the year-of-era."""
    chrono = _chrono(chronology)
    if isinstance(era, int):
        era = chrono.era_of(era)
    return chrono.date(year, month, day, era=era)

def date_from_epoch_day(chronology: ChronologyLike, epoch_day: int) -> ChronoDate:
    return _chrono(chronology).date_from_epoch_day(epoch_day)

def date_now(chronology: ChronologyLike, clock: Any = None) -> ChronoDate:
    return _chrono(chronology).date_now(clock)

def convert(d: ChronoDate, target: ChronologyLike) -> ChronoDate:
    return _chrono(target).date_from(d)

def is_leap_year(chronology: ChronologyLike, proleptic_year: int) -> bool:
    return _chrono(chronology).is_leap_year(proleptic_year)

def date_attributes(d: ChronoDate, names: Sequence[str]) -> Dict[str, Any]:
    return compute_attributes(d, names)

# ============================================================
# Period arithmetic
# ============================================================

def add(value, amount: int, unit: UnitLike):
    """Add `amount` of `unit` to a ChronoDate, LocalTime or LocalDateTime."""
    rules = _rules(unit)
    if isinstance(value, LocalDateTime):
        return rules.add_to_date_time(value, amount)
    if isinstance(value, LocalTime):
        return rules.add_to_time(value, amount)
    if isinstance(value, ChronoDate):
        return rules.add_to_date(value, amount)
    raise TypeError(f"Cannot add a period to {type(value).__name__}")

def between(start, end, unit: UnitLike) -> int:
    """Whole units from `start` to `end` (both of the same value type)."""
    rules = _rules(unit)
    if isinstance(start, LocalDateTime) and isinstance(end, LocalDateTime):
        return rules.period_between_date_times(start, end)
    if isinstance(start, LocalTime) and isinstance(end, LocalTime):
        return rules.period_between_times(start, end)
    if isinstance(start, ChronoDate) and isinstance(end, ChronoDate):
        return rules.period_between_dates(start, end)
    raise TypeError(
        f"Cannot measure between {type(start).__name__} and {type(end).__name__}"
    )
