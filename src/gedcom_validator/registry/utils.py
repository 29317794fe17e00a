from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from gedcom_validator.core.exceptions import (
    DateFormatError,
    LevelMismatchError,
    MultipleAssignmentError,
    UnsupportedTagError,
)
from gedcom_validator.dates.normalizer import parse_date
from gedcom_validator.loader.tokenizer import Line

DATE_LEVEL = 2
DATE_TAG = "DATE"
FIELD_LEVEL = 1


class BlockCursor:
    """
    Forward-only cursor over the field lines of one record block.

    The header line (index 0) is skipped. BIRT/DEAT/MARR/DIV read their
    companion ``2 DATE`` line through ``consume_date``.
    """

    def __init__(self, block: List[Line]):
        self.block = block
        self.index = 1

    @property
    def header(self) -> Line:
        return self.block[0]

    def has_next(self) -> bool:
        return self.index < len(self.block)

    def next_line(self) -> Line:
        line = self.block[self.index]
        self.index += 1
        return line

    def consume_date(self, owner: Line) -> date:
        if not self.has_next():
            raise DateFormatError(f"Date is not valid: missing DATE line after {owner}")

        line = self.next_line()
        if line.level != DATE_LEVEL or line.tag != DATE_TAG:
            raise LevelMismatchError(
                f"Level {DATE_LEVEL} {DATE_TAG} tag expected: {line.level} {line.tag}"
            )
        return parse_date(line.arg)


def ensure_unassigned(slots: Dict[str, Any], line: Line) -> None:
    if line.tag in slots:
        raise MultipleAssignmentError(
            f"{line.tag} cannot be assigned multiple times: {line}"
        )


def assign_once(slots: Dict[str, Any], line: Line, value: Any) -> None:
    """Store a single-valued field; a second occurrence is fatal."""
    ensure_unassigned(slots, line)
    slots[line.tag] = value


def ensure_field_level(line: Line) -> None:
    if line.level != FIELD_LEVEL:
        raise UnsupportedTagError(f"Tag is not supported: {line.tag} (level {line.level})")


def unsupported(line: Line) -> UnsupportedTagError:
    return UnsupportedTagError(f"Tag is not supported: {line.tag}")
