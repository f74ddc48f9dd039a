from __future__ import annotations
from typing import Any, Dict

from ..core.types import ChronoDate
from .registry import register_attribute, jdn

_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

def weekday(d: ChronoDate) -> Dict[str, Any]:
    # ISO numbering: 1=Mon..7=Sun
    dow = d.day_of_week
    return {"weekday": dow, "weekday_name": _WEEKDAY_NAMES[dow - 1]}

def era(d: ChronoDate) -> Dict[str, Any]:
    return {"era": d.era.name, "year_of_era": d.year_of_era}

def year_info(d: ChronoDate) -> Dict[str, Any]:
    return {
        "day_of_year": d.day_of_year,
        "length_of_year": d.length_of_year,
        "leap_year": d.is_leap_year,
    }

def month_info(d: ChronoDate) -> Dict[str, Any]:
    return {"length_of_month": d.length_of_month}

def julian_day(d: ChronoDate) -> Dict[str, Any]:
    return {"jdn": jdn(d), "epoch_day": d.to_epoch_day()}

register_attribute("weekday", weekday)
register_attribute("era", era)
register_attribute("year", year_info)
register_attribute("month", month_info)
register_attribute("julian_day", julian_day)
