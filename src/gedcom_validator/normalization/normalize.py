from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from gedcom_validator.core.exceptions import DanglingReferenceError
from gedcom_validator.registry.entities import Family, GedcomRegistry, Individual


@dataclass
class NormalizedRecords:
    """Display-ready records: sorted by id, families carrying spouse names."""

    indi: List[Individual] = field(default_factory=list)
    fami: List[Family] = field(default_factory=list)


def _spouse_name(indi: Mapping[str, Individual], fam: Family, role: str, iid: str) -> str:
    person = indi.get(iid)
    if person is None:
        raise DanglingReferenceError(
            f"Family {fam.id}: {role} {iid} is not a known individual"
        )
    return person.name


def normalize(
    registry: GedcomRegistry | None = None,
    *,
    indi: Optional[Mapping[str, Individual]] = None,
    fami: Optional[Mapping[str, Family]] = None,
) -> NormalizedRecords:
    """
    Backfill family spouse names and sort both record kinds by id.

    Accepts either a ``GedcomRegistry`` or ``indi=``/``fami=`` maps. Sorting
    is plain string ordering ("I10" < "I2") and stable.

    Raises:
        DanglingReferenceError: a HUSB/WIFE id names no individual.
    """
    if registry is not None:
        indi, fami = registry.indi, registry.fami
    indi_map: Mapping[str, Individual] = indi or {}
    fami_map: Mapping[str, Family] = fami or {}

    for fam in fami_map.values():
        fam.hname = _spouse_name(indi_map, fam, "HUSB", fam.hid)
        fam.wname = _spouse_name(indi_map, fam, "WIFE", fam.wid)

    return NormalizedRecords(
        indi=sorted(indi_map.values(), key=lambda i: i.id),
        fami=sorted(fami_map.values(), key=lambda f: f.id),
    )

