"""
Duplicate-record rules (US23-US25).
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Tuple

from gedcom_validator.validation.kinship import unique
from gedcom_validator.validation.model import Relation


def _groups(pairs: Iterable[Tuple[Hashable, str]]) -> List[List[str]]:
    """Group ids by key, keeping first-seen order; only groups of two or more."""
    grouped: Dict[Hashable, List[str]] = {}
    for key, iid in pairs:
        grouped.setdefault(key, []).append(iid)
    return [ids for ids in grouped.values() if len(ids) > 1]


def unique_name_and_birth_date(relation: Relation) -> List[str]:
    """US23"""
    groups = _groups(((ind.name, ind.birth), ind.id) for ind in relation.indi.values())
    return [
        f"US23: No more than one individual({','.join(ids)}) with the same name and birth date "
        f"should appear in a GEDCOM file."
        for ids in groups
    ]


def unique_families_by_spouses(relation: Relation) -> List[str]:
    """
    US24: no two families share husband name, wife name and marriage date.

    Names come from the individual records, falling back to a family's
    backfilled hname/wname; families whose names cannot be resolved are
    left out.
    """
    pairs = []
    for fam in relation.fami.values():
        husband, wife = relation.husband(fam), relation.wife(fam)
        hname = husband.name if husband else fam.hname
        wname = wife.name if wife else fam.wname
        if hname is None or wname is None:
            continue
        pairs.append(((hname, wname, fam.marriage), fam.id))

    return [
        f"US24: No more than one family({','.join(ids)}) with the same spouses by name and "
        f"marriage date should appear in a GEDCOM file."
        for ids in _groups(pairs)
    ]


def unique_first_names_in_families(relation: Relation) -> List[str]:
    """US25: children of one family never share both name and birth date."""
    out: List[str] = []
    for fam in relation.fami.values():
        # a child listed twice on CHIL lines is still one child
        kids = [relation.person(cid) for cid in unique(fam.cids)]
        groups = _groups(((c.name, c.birth), c.id) for c in kids if c is not None)
        out.extend(
            f"US25: No more than one child({','.join(ids)}) with the same name and birth date "
            f"should appear in family({fam.id})."
            for ids in groups
        )
    return out
