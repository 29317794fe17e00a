"""
Close-relative marriage rules (US17-US20).
"""

from __future__ import annotations

from typing import Callable, List

from gedcom_validator.registry.entities import Family
from gedcom_validator.validation import kinship
from gedcom_validator.validation.model import Relation


def no_marriages_to_descendants(relation: Relation) -> List[str]:
    """
    US17: nobody marries their own parent.

    A man is checked against his mother (wife of his famc family), a woman
    against her father.
    """
    out: List[str] = []
    for ind in relation.indi.values():
        parents = kinship.parent_family(relation, ind)
        if parents is None:
            continue
        for fid in ind.fams:
            fam = relation.family(fid)
            if fam is None:
                continue
            if ind.sex == "M" and fam.wid == parents.wid:
                out.append(
                    f"US17: Mother({parents.wid}) should not marry son({ind.id}) "
                    f"in family {parents.id} and {fam.id}."
                )
            elif ind.sex == "F" and fam.hid == parents.hid:
                out.append(
                    f"US17: Father({parents.hid}) should not marry daughter({ind.id}) "
                    f"in family {parents.id} and {fam.id}."
                )
    return out


def siblings_should_not_marry(relation: Relation) -> List[str]:
    """US18: siblings are not spouses; reported from the male sibling only."""
    out: List[str] = []
    for ind in relation.indi.values():
        if ind.sex != "M":
            continue
        sibs = set(kinship.siblings(relation, ind))
        if not sibs:
            continue
        for fid in ind.fams:
            fam = relation.family(fid)
            if fam is None:
                continue
            spouse = kinship.other_spouse(fam, ind.id)
            if spouse in sibs:
                out.append(
                    f"US18: Sibling({ind.id}) and sibling({spouse}) should not be married "
                    f"in family({fam.id})."
                )
    return out


def _shared_marriage_rule(
    relation: Relation,
    relatives: Callable[[Relation, Family], List[str]],
    message: str,
) -> List[str]:
    # Both sides of such a marriage find it, so report each family once.
    reported: List[str] = []
    for fam in relation.fami.values():
        for fid in kinship.shared_marriages(relation, fam, relatives(relation, fam)):
            if fid not in reported:
                reported.append(fid)
    return [message.format(fid=fid) for fid in reported]


def first_cousins_should_not_marry(relation: Relation) -> List[str]:
    """
    US19: no marriage between a family's child and a child of that child's
    aunt or uncle.
    """
    return _shared_marriage_rule(
        relation,
        kinship.first_cousins,
        "US19: First cousins should not marry one another in family({fid}).",
    )


def aunts_and_uncles(relation: Relation) -> List[str]:
    """US20: no marriage between a family's child and a sibling of either parent."""
    return _shared_marriage_rule(
        relation,
        kinship.aunts_and_uncles,
        "US20: Aunts/uncles and nieces/nephews should not be married in family({fid}).",
    )
