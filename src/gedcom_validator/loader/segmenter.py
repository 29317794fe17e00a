# src/gedcom_validator/loader/segmenter.py

from __future__ import annotations

from typing import Iterable, List

from gedcom_validator.core.exceptions import GedcomSyntaxError

from .tokenizer import Line

Block = List[Line]


def segment_blocks(lines: Iterable[Line]) -> List[Block]:
    """
    Group a flat list of Lines into record blocks.

    Rules:
        - Every level-0 line starts a new block.
        - Every other line joins the block opened by the nearest previous
          level-0 line, whatever its level.

    Administrative lines are expected to be filtered out already, so lines
    that followed a dropped HEAD/NOTE join the preceding record.
    """
    blocks: List[Block] = []

    for line in lines:
        if line.level == 0:
            blocks.append([line])
            continue

        if not blocks:
            raise GedcomSyntaxError(
                f"Line {line.lineno}: level {line.level} line outside of any record -> {line}"
            )
        blocks[-1].append(line)

    return blocks
