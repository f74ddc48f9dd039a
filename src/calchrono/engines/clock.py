"""
calchrono.engines.clock
-----------------------
Sources of "now". A clock yields an instant on the UTC time-line plus a fixed
wall-clock offset; chronologies only ever ask it for the current epoch day.
There are no time-zone rules here, only constant offsets.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union

from ..core.time import SECONDS_PER_DAY
from ..core.types import NANOS_PER_SECOND

MAX_OFFSET_SECONDS = 18 * 3600


class Clock(Protocol):
    offset_seconds: int

    def instant(self) -> Tuple[int, int]:
        """Returns (epoch seconds, nano of second) on the UTC time-line."""
        ...


def _check_offset(offset_seconds: int) -> None:
    if abs(offset_seconds) > MAX_OFFSET_SECONDS:
        raise ValueError(f"offset must be within +/-{MAX_OFFSET_SECONDS} seconds, got {offset_seconds}")


@dataclass(frozen=True)
class SystemClock:
    offset_seconds: int = 0

    def __post_init__(self) -> None:
        _check_offset(self.offset_seconds)

    def instant(self) -> Tuple[int, int]:
        secs, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return secs, nanos


@dataclass(frozen=True)
class FixedClock:
    epoch_seconds: int
    nanos: int = 0
    offset_seconds: int = 0

    def __post_init__(self) -> None:
        _check_offset(self.offset_seconds)
        if not (0 <= self.nanos < NANOS_PER_SECOND):
            raise ValueError("nanos must be in 0..999999999")

    def instant(self) -> Tuple[int, int]:
        return self.epoch_seconds, self.nanos


UTC_CLOCK = SystemClock()


def resolve_clock(clock: Optional[Union[Clock, int]]) -> Clock:
    """None means the system clock in UTC; an int is a fixed offset in seconds."""
    if clock is None:
        return UTC_CLOCK
    if isinstance(clock, int):
        return SystemClock(offset_seconds=clock)
    return clock


def clock_epoch_day(clock: Clock) -> int:
    secs, _ = clock.instant()
    return (secs + clock.offset_seconds) // SECONDS_PER_DAY
