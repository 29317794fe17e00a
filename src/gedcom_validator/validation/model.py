from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterator, List, Literal, Mapping, Optional, Tuple

from gedcom_validator.registry.entities import Family, Individual

RuleKind = Literal["error", "anomaly"]


@dataclass(frozen=True)
class Relation:
    """
    Everything a rule may read: both record maps and the reference "now".

    ``today`` is fixed once per validation run so every rule sees the same
    current date.
    """

    indi: Mapping[str, Individual] = field(default_factory=dict)
    fami: Mapping[str, Family] = field(default_factory=dict)
    today: date = field(default_factory=date.today)

    def person(self, iid: Optional[str]) -> Optional[Individual]:
        if not iid:
            return None
        return self.indi.get(iid)

    def family(self, fid: Optional[str]) -> Optional[Family]:
        if not fid:
            return None
        return self.fami.get(fid)

    def husband(self, fam: Family) -> Optional[Individual]:
        return self.person(fam.hid)

    def wife(self, fam: Family) -> Optional[Individual]:
        return self.person(fam.wid)

    def spouses(self, fam: Family) -> Iterator[Tuple[str, Individual]]:
        """Yield ("husband", person) / ("wife", person) for known spouses."""
        for role, person in (("husband", self.husband(fam)), ("wife", self.wife(fam))):
            if person is not None:
                yield role, person

    def children(self, fam: Family) -> Iterator[Individual]:
        """Known children in CHIL order; unknown ids are skipped."""
        for cid in fam.cids:
            child = self.person(cid)
            if child is not None:
                yield child


RuleCheck = Callable[[Relation], List[str]]


@dataclass(frozen=True)
class Rule:
    """One catalogue entry: a named, independently callable pure check."""

    code: str
    kind: RuleKind
    summary: str
    check: RuleCheck

    def __call__(self, relation: Relation) -> List[str]:
        return self.check(relation)


@dataclass
class ValidationReport:
    errors: List[str] = field(default_factory=list)
    anomalies: List[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.errors or self.anomalies)
