from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .types import ChronoDate, ChronoField, ValueRange

logger = logging.getLogger(__name__)


class Chronology(Protocol):
    """Capability set shared by every calendar system."""
    id: str
    calendar_type: str

    def info(self) -> Dict[str, Any]: ...

    # construction
    def date(self, year: int, month: int, day: int, *, era: Optional[Enum] = None) -> ChronoDate: ...
    def date_year_day(self, year: int, day_of_year: int, *, era: Optional[Enum] = None) -> ChronoDate: ...
    def date_from_epoch_day(self, epoch_day: int) -> ChronoDate: ...
    def date_from(self, other: ChronoDate) -> ChronoDate: ...
    def date_now(self, clock: Any = None) -> ChronoDate: ...

    # eras and years
    def is_leap_year(self, proleptic_year: int) -> bool: ...
    def proleptic_year(self, era: Enum, year_of_era: int) -> int: ...
    def era_of(self, value: int) -> Enum: ...
    def eras(self) -> List[Enum]: ...
    def era_and_year_of_era(self, proleptic_year: int) -> Tuple[Enum, int]: ...
    def range(self, field: ChronoField) -> ValueRange: ...

    # conversion kernel
    def epoch_day_from_fields(self, proleptic_year: int, month: int, day: int) -> int: ...
    def fields_from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]: ...
    def check_fields(self, proleptic_year: int, month: int, day: int) -> None: ...
    def length_of_month(self, proleptic_year: int, month: int) -> int: ...
    def length_of_year(self, proleptic_year: int) -> int: ...
    def day_of_year(self, proleptic_year: int, month: int, day: int) -> int: ...


@dataclass
class ChronologyRegistry:
    _chronologies: Dict[str, Chronology]

    def get(self, name: str) -> Chronology:
        key = name.lower()
        if key not in self._chronologies:
            raise KeyError(f"Unknown chronology '{name}'. Available: {sorted(self._chronologies)}")
        return self._chronologies[key]

    def list(self) -> List[str]:
        return sorted(self._chronologies.keys())

    def register(self, name: str, chronology: Chronology, *, overwrite: bool = False) -> None:
        key = name.lower()
        if (not overwrite) and (key in self._chronologies):
            raise KeyError(f"Chronology '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering chronology %s as %r", chronology.id, key)
        self._chronologies[key] = chronology
