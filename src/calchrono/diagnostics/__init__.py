"""Diagnostics package.

- round_trip, cycle_table: always available, light-weight checks
- leap_years: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "cycle_table", "leap_years"]
