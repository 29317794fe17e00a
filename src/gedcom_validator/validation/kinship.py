"""
Relational lookups over the famc/fams/cids links.

All helpers return identifier lists in discovery order with duplicates
removed, and silently skip identifiers that name no record: the rules
built on them must never fail on incomplete data.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from gedcom_validator.registry.entities import Family, Individual
from gedcom_validator.validation.model import Relation


def unique(ids: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for i in ids:
        if i and i not in seen:
            seen.add(i)
            out.append(i)
    return out


def parent_family(relation: Relation, person: Individual) -> Optional[Family]:
    return relation.family(person.famc)


def siblings(relation: Relation, person: Individual) -> List[str]:
    """Other children of the person's famc family."""
    fam = parent_family(relation, person)
    if fam is None:
        return []
    return unique(cid for cid in fam.cids if cid != person.id)


def other_spouse(fam: Family, iid: str) -> str:
    return fam.wid if fam.hid == iid else fam.hid


def marriages_of(relation: Relation, ids: Iterable[str]) -> List[str]:
    """Union of the fams lists of the given individuals."""
    out: List[str] = []
    for iid in ids:
        person = relation.person(iid)
        if person is not None:
            out.extend(person.fams)
    return unique(out)


def aunts_and_uncles(relation: Relation, fam: Family) -> List[str]:
    """Siblings of either spouse, excluding the family's own children."""
    own = set(fam.cids)
    found: List[str] = []
    for parent_id in fam.spouses:
        parent = relation.person(parent_id)
        if parent is not None:
            found.extend(s for s in siblings(relation, parent) if s not in own)
    return unique(found)


def first_cousins(relation: Relation, fam: Family) -> List[str]:
    """Children of the aunts' and uncles' own families."""
    own = set(fam.cids)
    found: List[str] = []
    for fid in marriages_of(relation, aunts_and_uncles(relation, fam)):
        if fid == fam.id:
            continue
        cousin_family = relation.family(fid)
        if cousin_family is not None:
            found.extend(c for c in cousin_family.cids if c not in own)
    return unique(found)


def shared_marriages(relation: Relation, fam: Family, relatives: Iterable[str]) -> List[str]:
    """Spouse families shared by one of ``fam``'s children and one of ``relatives``."""
    theirs = set(marriages_of(relation, relatives))
    theirs.discard(fam.id)
    return [fid for fid in marriages_of(relation, fam.cids) if fid in theirs]
