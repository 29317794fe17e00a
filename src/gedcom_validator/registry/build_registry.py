from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from gedcom_validator.loader.tokenizer import Line
from gedcom_validator.registry.build_family import build_family
from gedcom_validator.registry.build_individual import build_individual
from gedcom_validator.registry.entities import Family, GedcomRegistry, Individual
from gedcom_validator.registry.utils import unsupported

RecordBuilder = Callable[[List[Line]], "Individual | Family"]

RECORD_BUILDERS: Dict[str, RecordBuilder] = {
    "INDI": build_individual,
    "FAM": build_family,
}


def build_record(block: List[Line]) -> Individual | Family:
    """Dispatch a block to its builder by the tag of its level-0 line."""
    header = block[0]
    builder = RECORD_BUILDERS.get(header.tag)
    if builder is None:
        raise unsupported(header)
    return builder(block)


# ----------------------------------------------------------------------
# Registry builder
# ----------------------------------------------------------------------

def build_registry(blocks: Iterable[List[Line]]) -> GedcomRegistry:
    """Build every block in input order; duplicate ids abort the build."""
    registry = GedcomRegistry()

    for block in blocks:
        registry.register(build_record(block))

    return registry
