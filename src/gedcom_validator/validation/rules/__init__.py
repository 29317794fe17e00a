"""
Rule implementations, grouped by the data they look at.

Each public function takes a ``Relation`` and returns a list of messages,
each starting with its ``USnn:`` code.
"""

from gedcom_validator.validation.rules import children, dates, kinship, marriage, uniqueness

__all__ = ["children", "dates", "kinship", "marriage", "uniqueness"]
