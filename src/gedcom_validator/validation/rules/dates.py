"""
Date sanity rules (US01-US07).

Every check here is an error: the data describes an impossible timeline.
"""

from __future__ import annotations

from typing import List

from gedcom_validator.dates.arithmetic import get_age
from gedcom_validator.dates.normalizer import format_date as fmt
from gedcom_validator.validation.model import Relation

MAX_AGE = 150


def dates_before_current_date(relation: Relation) -> List[str]:
    """US01: no birth, death, marriage or divorce after today."""
    out: List[str] = []
    now = relation.today

    for ind in relation.indi.values():
        if ind.birth > now:
            out.append(f"US01: birthday({fmt(ind.birth)}) of {ind.name}({ind.id}) should not be after current date.")
        if ind.death and ind.death > now:
            out.append(f"US01: death({fmt(ind.death)}) of {ind.name}({ind.id}) should not be after current date.")

    for fam in relation.fami.values():
        if fam.marriage > now:
            out.append(f"US01: marriage date({fmt(fam.marriage)}) of family({fam.id}) should not be after current date.")
        if fam.divorce and fam.divorce > now:
            out.append(f"US01: divorce date({fmt(fam.divorce)}) of family({fam.id}) should not be after current date.")

    return out


def birth_before_marriage(relation: Relation) -> List[str]:
    """US02: both spouses are born no later than the marriage."""
    out: List[str] = []
    for fam in relation.fami.values():
        for role, spouse in relation.spouses(fam):
            if spouse.birth > fam.marriage:
                out.append(
                    f"US02: marriage date({fmt(fam.marriage)}) of family({fam.id}) should not be "
                    f"before birthday({fmt(spouse.birth)}) of {role}({spouse.id})."
                )
    return out


def birth_before_death(relation: Relation) -> List[str]:
    """US03"""
    out: List[str] = []
    for ind in relation.indi.values():
        if ind.death and ind.birth > ind.death:
            out.append(
                f"US03: death({fmt(ind.death)}) of {ind.name}({ind.id}) should not be "
                f"before birthday({fmt(ind.birth)})."
            )
    return out


def marriage_before_divorce(relation: Relation) -> List[str]:
    """US04"""
    out: List[str] = []
    for fam in relation.fami.values():
        if fam.divorce and fam.marriage > fam.divorce:
            out.append(
                f"US04: marriage date({fmt(fam.marriage)}) of family({fam.id}) should not be "
                f"after divorce({fmt(fam.divorce)})."
            )
    return out


def marriage_before_death(relation: Relation) -> List[str]:
    """US05: a marriage cannot follow the death of either spouse."""
    out: List[str] = []
    for fam in relation.fami.values():
        for role, spouse in relation.spouses(fam):
            if spouse.death and fam.marriage > spouse.death:
                out.append(
                    f"US05: marriage date({fmt(fam.marriage)}) of family({fam.id}) should not be "
                    f"after death({fmt(spouse.death)}) of {role}({spouse.id})."
                )
    return out


def divorce_before_death(relation: Relation) -> List[str]:
    """US06: a divorce cannot follow the death of either spouse."""
    out: List[str] = []
    for fam in relation.fami.values():
        if not fam.divorce:
            continue
        for role, spouse in relation.spouses(fam):
            if spouse.death and fam.divorce > spouse.death:
                out.append(
                    f"US06: divorce date({fmt(fam.divorce)}) of family({fam.id}) should not be "
                    f"after death({fmt(spouse.death)}) of {role}({spouse.id})."
                )
    return out


def less_than_150_years_old(relation: Relation) -> List[str]:
    """US07: age at death, or current age for the living, is at most 150."""
    out: List[str] = []
    for ind in relation.indi.values():
        age = get_age(ind.birth, ind.death or relation.today)
        if age > MAX_AGE:
            out.append(f"US07: age {age} of {ind.name}({ind.id}) should not be more than {MAX_AGE}.")
    return out
