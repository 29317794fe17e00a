from __future__ import annotations

from typing import Any, Dict, List

from gedcom_validator.core.exceptions import InvalidEnumError
from gedcom_validator.loader.tokenizer import Line
from gedcom_validator.registry.entities import SEXES, Individual
from gedcom_validator.registry.utils import (
    BlockCursor,
    assign_once,
    ensure_field_level,
    ensure_unassigned,
    unsupported,
)

DATE_TAGS = {"BIRT", "DEAT"}
VALUE_TAGS = {"NAME", "SEX", "FAMC"}


def build_individual(block: List[Line]) -> Individual:
    """
    Build an Individual from an INDI block.

    PURE FUNCTION:
      - no registry access
      - no cross-record linking

    NAME/SEX/BIRT/DEAT/FAMC are single-valued; FAMS repeats and keeps
    input order.
    """
    cursor = BlockCursor(block)
    if cursor.header.tag != "INDI":
        raise ValueError(f"Expected INDI block, got {cursor.header.tag}")

    slots: Dict[str, Any] = {}
    fams: List[str] = []

    while cursor.has_next():
        line = cursor.next_line()
        ensure_field_level(line)

        if line.tag in VALUE_TAGS:
            ensure_unassigned(slots, line)
            if line.tag == "SEX" and line.arg not in SEXES:
                raise InvalidEnumError(f"SEX should only be M or F: {line}")
            assign_once(slots, line, line.arg)
        elif line.tag in DATE_TAGS:
            ensure_unassigned(slots, line)
            assign_once(slots, line, cursor.consume_date(line))
        elif line.tag == "FAMS":
            fams.append(line.arg)
        else:
            raise unsupported(line)

    return Individual(
        id=cursor.header.arg,
        name=slots.get("NAME", ""),
        sex=slots.get("SEX", ""),
        birth=slots.get("BIRT"),
        death=slots.get("DEAT"),
        famc=slots.get("FAMC") or None,
        fams=fams,
    )
