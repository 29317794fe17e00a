"""
engine.py
Runs the rule catalogue over a set of records.

Rules are pure functions over a ``Relation``; the engine fixes "today"
once, runs the error rules and then the anomaly rules in catalogue order,
and concatenates their messages.
"""

from __future__ import annotations

from datetime import date
from typing import List, Mapping, Optional

from gedcom_validator.logging import get_logger
from gedcom_validator.registry.entities import Family, Individual
from gedcom_validator.validation.model import Relation, Rule, ValidationReport
from gedcom_validator.validation.rules import children, dates, kinship, marriage, uniqueness

log = get_logger("validation")


ERROR_RULES: List[Rule] = [
    Rule("US01", "error", "Dates before current date", dates.dates_before_current_date),
    Rule("US02", "error", "Birth before marriage", dates.birth_before_marriage),
    Rule("US03", "error", "Birth before death", dates.birth_before_death),
    Rule("US04", "error", "Marriage before divorce", dates.marriage_before_divorce),
    Rule("US05", "error", "Marriage before death", dates.marriage_before_death),
    Rule("US06", "error", "Divorce before death", dates.divorce_before_death),
    Rule("US07", "error", "Less than 150 years old", dates.less_than_150_years_old),
    Rule("US09", "error", "Birth before death of parents", children.birth_before_death_of_parents),
]

ANOMALY_RULES: List[Rule] = [
    Rule("US08", "anomaly", "Birth before marriage of parents", children.birth_before_marriage_of_parents),
    Rule("US10", "anomaly", "Marriage after 14", marriage.marriage_after_14),
    Rule("US11", "anomaly", "No bigamy", marriage.no_bigamy),
    Rule("US12", "anomaly", "Parents not too old", children.parents_not_too_old),
    Rule("US13", "anomaly", "Siblings spacing", children.siblings_spacing),
    Rule("US14", "anomaly", "Multiple births <= 5", children.multiple_births_no_larger_than_5),
    Rule("US15", "anomaly", "Fewer than 15 siblings", children.fewer_than_15_siblings),
    Rule("US16", "anomaly", "Male last names", children.male_last_names),
    Rule("US17", "anomaly", "No marriages to descendants", kinship.no_marriages_to_descendants),
    Rule("US18", "anomaly", "Siblings should not marry", kinship.siblings_should_not_marry),
    Rule("US19", "anomaly", "First cousins should not marry", kinship.first_cousins_should_not_marry),
    Rule("US20", "anomaly", "Aunts and uncles", kinship.aunts_and_uncles),
    Rule("US21", "anomaly", "Correct gender for role", marriage.correct_gender_for_role),
    Rule("US23", "anomaly", "Unique name and birth date", uniqueness.unique_name_and_birth_date),
    Rule("US24", "anomaly", "Unique families by spouses", uniqueness.unique_families_by_spouses),
    Rule("US25", "anomaly", "Unique first names in families", uniqueness.unique_first_names_in_families),
]


def rule_catalogue() -> List[Rule]:
    """Every rule, errors first, in evaluation order."""
    return [*ERROR_RULES, *ANOMALY_RULES]


def _run(rules: List[Rule], relation: Relation) -> List[str]:
    out: List[str] = []
    for rule in rules:
        found = rule(relation)
        if found:
            log.debug("%s produced %d message(s)", rule.code, len(found))
        out.extend(found)
    return out


def validate(
    indi: Optional[Mapping[str, Individual]] = None,
    fami: Optional[Mapping[str, Family]] = None,
    *,
    today: Optional[date] = None,
) -> ValidationReport:
    """
    Evaluate every rule against ``indi`` and ``fami``.

    ``today`` pins the current date for the whole run; it defaults to the
    real date. Inputs are never modified, so repeated calls with the same
    arguments return equal reports.
    """
    relation = Relation(indi=indi or {}, fami=fami or {}, today=today or date.today())

    report = ValidationReport(
        errors=_run(ERROR_RULES, relation),
        anomalies=_run(ANOMALY_RULES, relation),
    )
    log.info(
        "Validation finished: %d error(s), %d anomaly(ies) over %d individuals, %d families",
        len(report.errors),
        len(report.anomalies),
        len(relation.indi),
        len(relation.fami),
    )
    return report
