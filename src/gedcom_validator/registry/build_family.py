from __future__ import annotations

from typing import Any, Dict, List

from gedcom_validator.loader.tokenizer import Line
from gedcom_validator.registry.entities import Family
from gedcom_validator.registry.utils import (
    BlockCursor,
    assign_once,
    ensure_field_level,
    ensure_unassigned,
    unsupported,
)

DATE_TAGS = {"MARR", "DIV"}
VALUE_TAGS = {"HUSB", "WIFE"}


def build_family(block: List[Line]) -> Family:
    """
    Build a Family from a FAM block.

    PURE FUNCTION:
      - no registry access
      - no cross-record linking (hname/wname stay empty until normalization)
    """
    cursor = BlockCursor(block)
    if cursor.header.tag != "FAM":
        raise ValueError(f"Expected FAM block, got {cursor.header.tag}")

    slots: Dict[str, Any] = {}
    cids: List[str] = []

    while cursor.has_next():
        line = cursor.next_line()
        ensure_field_level(line)

        if line.tag in VALUE_TAGS:
            assign_once(slots, line, line.arg)
        elif line.tag in DATE_TAGS:
            ensure_unassigned(slots, line)
            assign_once(slots, line, cursor.consume_date(line))
        elif line.tag == "CHIL":
            cids.append(line.arg)
        else:
            raise unsupported(line)

    return Family(
        id=cursor.header.arg,
        hid=slots.get("HUSB", ""),
        wid=slots.get("WIFE", ""),
        cids=cids,
        marriage=slots.get("MARR"),
        divorce=slots.get("DIV"),
    )
