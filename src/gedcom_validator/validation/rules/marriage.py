"""
Marriage rules (US10, US11, US21).
"""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from gedcom_validator.dates.arithmetic import get_age
from gedcom_validator.dates.normalizer import format_date as fmt
from gedcom_validator.registry.entities import Family
from gedcom_validator.validation.model import Relation

MIN_MARRIAGE_AGE = 14


def marriage_after_14(relation: Relation) -> List[str]:
    """US10: both spouses are at least 14 on the marriage date."""
    out: List[str] = []
    for fam in relation.fami.values():
        for role, spouse in relation.spouses(fam):
            if get_age(spouse.birth, fam.marriage) < MIN_MARRIAGE_AGE:
                out.append(
                    f"US10: marriage({fmt(fam.marriage)}) of family({fam.id}) should be "
                    f"{MIN_MARRIAGE_AGE} years after birth({fmt(spouse.birth)}) of {role}({spouse.id})."
                )
    return out


def _interval(fam: Family, today: date) -> Tuple[date, date]:
    return fam.marriage, fam.divorce or today


def no_bigamy(relation: Relation) -> List[str]:
    """
    US11: one person's marriages must not overlap.

    Each family is compared, per spouse role, against every earlier family
    the same person belongs to. Intervals are ``[marriage, divorce or now)``.
    Equal marriage dates get their own message; the later family is named
    as the offender.
    """
    out: List[str] = []
    seen: List[Family] = []

    for fam in relation.fami.values():
        start, end = _interval(fam, relation.today)
        for role, iid in (("husband", fam.hid), ("wife", fam.wid)):
            for prev in seen:
                if iid not in (prev.hid, prev.wid):
                    continue
                prev_start, prev_end = _interval(prev, relation.today)
                if start == prev_start:
                    out.append(
                        f"US11: {role}({iid}) marriage({fam.id}) on {fmt(start)} cannot have the same "
                        f"date as marriage({prev.id}) on {fmt(prev_start)}."
                    )
                elif start < prev_end and prev_start < end:
                    out.append(
                        f"US11: {role}({iid}) marriage({fam.id}) on {fmt(start)} cannot occur during "
                        f"marriage({prev.id}) on {fmt(prev_start)}."
                    )
        seen.append(fam)

    return out


def correct_gender_for_role(relation: Relation) -> List[str]:
    """US21: husbands are male and wives are female."""
    out: List[str] = []
    for fam in relation.fami.values():
        husband = relation.husband(fam)
        wife = relation.wife(fam)
        if (husband and husband.sex != "M") or (wife and wife.sex != "F"):
            out.append(
                f"US21: Husband in family({fam.id}) should be male and wife in family should be female."
            )
    return out
