from __future__ import annotations

from .entities import SEXES, Family, GedcomRegistry, Individual
from .build_family import build_family
from .build_individual import build_individual
from .build_registry import RECORD_BUILDERS, build_record, build_registry

__all__ = [
    "RECORD_BUILDERS",
    "SEXES",
    "Family",
    "GedcomRegistry",
    "Individual",
    "build_family",
    "build_individual",
    "build_record",
    "build_registry",
]
