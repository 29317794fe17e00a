"""
GEDCOM validator: parse individual/family records and check them against
the US01-US25 rule catalogue.

    from gedcom_validator import parse, normalize, validate

    registry = parse(text)
    report = validate(registry.indi, registry.fami)
"""

from __future__ import annotations

from gedcom_validator.normalization import NormalizedRecords, normalize
from gedcom_validator.parser_core import parse, parse_file
from gedcom_validator.validation import ValidationReport, validate

__version__ = "0.1.0"

__all__ = [
    "NormalizedRecords",
    "ValidationReport",
    "__version__",
    "normalize",
    "parse",
    "parse_file",
    "validate",
]
