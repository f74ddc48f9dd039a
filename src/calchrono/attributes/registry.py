from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import ChronoDate
from ..core.time import jdn_from_epoch_day

AttrFunc = Callable[[ChronoDate], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(d: ChronoDate, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](d))
    return out

# helper for attribute implementations
def jdn(d: ChronoDate) -> int:
    return jdn_from_epoch_day(d.to_epoch_day())
