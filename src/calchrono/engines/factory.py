"""
calchrono.engines.factory
-------------------------
Transforms pure data specifications into live chronology objects.
"""

from __future__ import annotations
from calchrono.core.engine import Chronology
from calchrono.engines.hijrah import HijrahChronology, HijrahParams
from calchrono.engines.iso import IsoChronology, IsoParams
from calchrono.engines.specs import ChronologySpec


def make_chronology(spec: ChronologySpec) -> Chronology:
    """The universal entry point."""
    if spec.kind == "iso":
        if not isinstance(spec.params, IsoParams):
            raise TypeError(f"ISO spec needs IsoParams, got {type(spec.params)}")
        return IsoChronology(spec.params)
    if spec.kind == "hijrah":
        if not isinstance(spec.params, HijrahParams):
            raise TypeError(f"Hijrah spec needs HijrahParams, got {type(spec.params)}")
        return HijrahChronology(spec.params)
    raise TypeError(f"Unknown chronology kind: {spec.kind!r}")
