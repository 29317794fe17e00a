"""
Parent/child timing and sibling-set rules (US08, US09, US12-US16).
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List

from gedcom_validator.dates.arithmetic import add_months, diff_days, diff_months, get_age
from gedcom_validator.dates.normalizer import format_date as fmt
from gedcom_validator.validation.model import Relation

# US08: children born after divorce
MONTHS_AFTER_DIVORCE = 8
# US09: posthumous children
MONTHS_AFTER_FATHER_DEATH = 9
# US12
MAX_FATHER_GAP = 80
MAX_MOTHER_GAP = 60
# US13: twins are under 2 days apart, other siblings at least 8 months
TWIN_DAYS = 2
SIBLING_MONTHS = 8
# US14 / US15
MAX_MULTIPLE_BIRTHS = 5
MAX_SIBLINGS = 15


def birth_before_marriage_of_parents(relation: Relation) -> List[str]:
    """
    US08: children are born after the parents' marriage and, when the
    parents divorced, within 8 whole months of the divorce.
    """
    out: List[str] = []
    for fam in relation.fami.values():
        for child in relation.children(fam):
            if child.birth <= fam.marriage:
                out.append(
                    f"US08: birth({fmt(child.birth)}) of child {child.name}({child.id}) should be "
                    f"after marriage({fmt(fam.marriage)}) in family({fam.id})."
                )
            elif (
                fam.divorce
                and child.birth > fam.divorce
                and diff_months(fam.divorce, child.birth) > MONTHS_AFTER_DIVORCE
            ):
                out.append(
                    f"US08: birth({fmt(child.birth)}) of child {child.name}({child.id}) should not be "
                    f"more than {MONTHS_AFTER_DIVORCE} months after divorce({fmt(fam.divorce)}) "
                    f"in family({fam.id})."
                )
    return out


def birth_before_death_of_parents(relation: Relation) -> List[str]:
    """US09: born before the mother's death and at most 9 months after the father's."""
    out: List[str] = []
    for fam in relation.fami.values():
        mother = relation.wife(fam)
        father = relation.husband(fam)
        for child in relation.children(fam):
            if mother and mother.death and child.birth > mother.death:
                out.append(
                    f"US09: birthday({fmt(child.birth)}) of child {child.name}({child.id}) should be "
                    f"before death({fmt(mother.death)}) of wife({mother.id})."
                )
            if father and father.death:
                limit = add_months(father.death, MONTHS_AFTER_FATHER_DEATH)
                if child.birth > limit:
                    out.append(
                        f"US09: birthday({fmt(child.birth)}) of child {child.name}({child.id}) should be "
                        f"within {MONTHS_AFTER_FATHER_DEATH} months after death({fmt(father.death)}) "
                        f"of husband({father.id})."
                    )
    return out


def parents_not_too_old(relation: Relation) -> List[str]:
    """US12: father less than 80 and mother less than 60 years older than each child."""
    out: List[str] = []
    now = relation.today
    for fam in relation.fami.values():
        limits = {"husband": MAX_FATHER_GAP, "wife": MAX_MOTHER_GAP}
        parents = list(relation.spouses(fam))
        for child in relation.children(fam):
            child_age = get_age(child.birth, now)
            for role, parent in parents:
                parent_age = get_age(parent.birth, now)
                gap = parent_age - child_age
                if gap >= limits[role]:
                    out.append(
                        f"US12: {role}({parent.id}) of age {parent_age} in family({fam.id}) should be "
                        f"less than {limits[role]} years older than child({child.id}) of age "
                        f"{child_age} (difference: {gap})."
                    )
    return out


def siblings_spacing(relation: Relation) -> List[str]:
    """US13: sibling births are under 2 days apart (twins) or at least 8 months apart."""
    out: List[str] = []
    for fam in relation.fami.values():
        seen = []
        for child in relation.children(fam):
            for prev in seen:
                if diff_days(prev.birth, child.birth) < TWIN_DAYS:
                    continue
                if diff_months(prev.birth, child.birth) >= SIBLING_MONTHS:
                    continue
                out.append(
                    f"US13: Family({fam.id}), birth dates({prev.id}({fmt(prev.birth)}) and "
                    f"{child.id}({fmt(child.birth)})) of siblings({prev.name}, {child.name}) should be "
                    f"less than {TWIN_DAYS} days apart or more than {SIBLING_MONTHS} months apart."
                )
            seen.append(child)
    return out


def multiple_births_no_larger_than_5(relation: Relation) -> List[str]:
    """US14: no more than five siblings share a birth date."""
    out: List[str] = []
    for fam in relation.fami.values():
        if len(fam.cids) <= MAX_MULTIPLE_BIRTHS:
            continue
        by_birth: Dict[date, List[str]] = {}
        for child in relation.children(fam):
            by_birth.setdefault(child.birth, []).append(child.id)
        for birth, ids in by_birth.items():
            if len(ids) > MAX_MULTIPLE_BIRTHS:
                out.append(
                    f"US14: Family({fam.id}) should have no more than {MAX_MULTIPLE_BIRTHS} "
                    f"siblings({','.join(ids)}) born at the same time({fmt(birth)})."
                )
    return out


def fewer_than_15_siblings(relation: Relation) -> List[str]:
    """US15"""
    return [
        f"US15: There should be fewer than {MAX_SIBLINGS} siblings in a family({fam.id})."
        for fam in relation.fami.values()
        if len(fam.cids) >= MAX_SIBLINGS
    ]


def male_last_names(relation: Relation) -> List[str]:
    """
    US16: children carry the husband's surname.

    The surname is the last whitespace-delimited token of the name; only
    the first mismatch per family is reported.
    """
    out: List[str] = []
    for fam in relation.fami.values():
        husband = relation.husband(fam)
        if husband is None:
            continue
        for child in relation.children(fam):
            if child.surname != husband.surname:
                out.append(
                    f"US16: Child {child.name}({child.id}) of family({fam.id}) should have the same "
                    f"last name as husband {husband.name}({husband.id})."
                )
                break
    return out
