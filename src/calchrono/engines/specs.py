from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal

from .hijrah import HijrahParams
from .iso import IsoParams

ChronologyKind = Literal["iso", "hijrah"]


@dataclass(frozen=True)
class ChronologySpec:
    """Pure data payload for constructing a built-in chronology."""
    kind: ChronologyKind
    name: str
    params: Any  # IsoParams | HijrahParams


# ============================================================
# HIJRAH CONSTANTS
# ============================================================

# 1 Muharram AH 1 = Julian 622-07-16 (civil, Friday epoch) = JDN 1948440
HIJRAH_EPOCH_DAY = -492148

HIJRAH_CYCLE_YEARS = 30
HIJRAH_CYCLE_DAYS = 10631

# Positions of (year mod 30) whose final month has 30 days
HIJRAH_LEAP_RESIDUES = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})

HIJRAH_MAX_YEAR_OF_ERA = 9999


ISO_SPEC = ChronologySpec(
    kind="iso",
    name="iso",
    params=IsoParams(),
)

HIJRAH_SPEC = ChronologySpec(
    kind="hijrah",
    name="hijrah",
    params=HijrahParams(
        epoch_day=HIJRAH_EPOCH_DAY,
        cycle_years=HIJRAH_CYCLE_YEARS,
        cycle_days=HIJRAH_CYCLE_DAYS,
        leap_residues=HIJRAH_LEAP_RESIDUES,
        max_year_of_era=HIJRAH_MAX_YEAR_OF_ERA,
    ),
)

ALL_SPECS: Dict[str, ChronologySpec] = {
    ISO_SPEC.name: ISO_SPEC,
    HIJRAH_SPEC.name: HIJRAH_SPEC,
}
