"""
Validation engine: the US01-US25 rule catalogue and its runner.
"""

from gedcom_validator.validation.engine import (
    ANOMALY_RULES,
    ERROR_RULES,
    rule_catalogue,
    validate,
)
from gedcom_validator.validation.model import Relation, Rule, RuleKind, ValidationReport

__all__ = [
    "ANOMALY_RULES",
    "ERROR_RULES",
    "Relation",
    "Rule",
    "RuleKind",
    "ValidationReport",
    "rule_catalogue",
    "validate",
]
