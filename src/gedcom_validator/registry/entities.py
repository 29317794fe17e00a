from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from gedcom_validator.core.exceptions import (
    DanglingReferenceError,
    DuplicateKeyError,
    InvalidEnumError,
    MissingMandatoryFieldError,
)

SEXES = frozenset({"M", "F"})


def _missing(**fields) -> List[str]:
    return [name for name, value in fields.items() if not value]


# -----------------------------
# Entities
# -----------------------------

@dataclass(frozen=True, slots=True)
class Individual:
    """
    A person record.

    ``famc`` is the family this person is a child in; ``fams`` lists the
    families this person is a spouse in, in input order. The record must be
    linked to at least one family when it is constructed.
    """
    id: str
    name: str
    sex: str
    birth: date
    death: Optional[date] = None
    famc: Optional[str] = None
    fams: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        missing = _missing(id=self.id, name=self.name, sex=self.sex, birth=self.birth)
        if not (self.famc or self.fams):
            missing.append("famc|fams")
        if missing:
            raise MissingMandatoryFieldError(
                f"Individual {self.id or '?'} is invalid, missing: {', '.join(missing)}"
            )
        if self.sex not in SEXES:
            raise InvalidEnumError(f"SEX should only be M or F: {self.sex}")

    @property
    def alive(self) -> bool:
        return self.death is None

    @property
    def surname(self) -> str:
        """Last whitespace-delimited token of the name (a heuristic, not name parsing)."""
        parts = self.name.split()
        return parts[-1] if parts else ""


@dataclass(slots=True)
class Family:
    """
    A union of one husband, one wife and zero or more children.

    ``hname``/``wname`` are display fields filled in by the normalizer.
    """
    id: str
    hid: str
    wid: str
    cids: List[str] = field(default_factory=list)
    marriage: Optional[date] = None
    divorce: Optional[date] = None

    hname: Optional[str] = field(default=None, init=False)
    wname: Optional[str] = field(default=None, init=False)

    def __post_init__(self) -> None:
        missing = _missing(id=self.id, hid=self.hid, wid=self.wid, marriage=self.marriage)
        if missing:
            raise MissingMandatoryFieldError(
                f"Family {self.id or '?'} is invalid, missing: {', '.join(missing)}"
            )

    @property
    def spouses(self) -> List[str]:
        return [self.hid, self.wid]


# -----------------------------
# Registry
# -----------------------------

@dataclass(slots=True)
class GedcomRegistry:
    """
    In-memory record store keyed by identifier, in input order.
    """
    indi: Dict[str, Individual] = field(default_factory=dict)
    fami: Dict[str, Family] = field(default_factory=dict)

    def register_individual(self, ind: Individual) -> None:
        if ind.id in self.indi:
            raise DuplicateKeyError(f"Duplicated individual: {ind.id}")
        self.indi[ind.id] = ind

    def register_family(self, fam: Family) -> None:
        if fam.id in self.fami:
            raise DuplicateKeyError(f"Duplicated family: {fam.id}")
        self.fami[fam.id] = fam

    def register(self, record: Individual | Family) -> None:
        if isinstance(record, Family):
            self.register_family(record)
        elif isinstance(record, Individual):
            self.register_individual(record)
        else:
            raise TypeError(f"Unknown record: {record!r}")

    def get_individual(self, iid: str) -> Optional[Individual]:
        return self.indi.get(iid)

    def get_family(self, fid: str) -> Optional[Family]:
        return self.fami.get(fid)

    def check_references(self) -> None:
        """Raise DanglingReferenceError for the first identifier that names no record."""
        for fam in self.fami.values():
            for role, iid in (("HUSB", fam.hid), ("WIFE", fam.wid)):
                if iid not in self.indi:
                    raise DanglingReferenceError(
                        f"Family {fam.id}: {role} {iid} is not a known individual"
                    )
            for cid in fam.cids:
                if cid not in self.indi:
                    raise DanglingReferenceError(
                        f"Family {fam.id}: CHIL {cid} is not a known individual"
                    )

        for ind in self.indi.values():
            if ind.famc and ind.famc not in self.fami:
                raise DanglingReferenceError(
                    f"Individual {ind.id}: FAMC {ind.famc} is not a known family"
                )
            for fid in ind.fams:
                if fid not in self.fami:
                    raise DanglingReferenceError(
                        f"Individual {ind.id}: FAMS {fid} is not a known family"
                    )
