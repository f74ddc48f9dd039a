from __future__ import annotations
import logging

from calchrono.core.engine import ChronologyRegistry
from calchrono.engines.specs import ALL_SPECS
from calchrono.engines.factory import make_chronology

logger = logging.getLogger(__name__)

def build_registry() -> ChronologyRegistry:
    reg = ChronologyRegistry({})
    for name, spec in ALL_SPECS.items():
        reg.register(name, make_chronology(spec))
    logger.debug("chronology registry built: %s", reg.list())
    return reg
