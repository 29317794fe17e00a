# src/gedcom_validator/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_validator.loader import (
        Line,
        scan_line,
        scan_text,
        scan_file,
        segment_blocks,
    )
"""

from __future__ import annotations

from .tokenizer import Line, is_unused, scan_file, scan_line, scan_lines, scan_text
from .segmenter import Block, segment_blocks


__all__ = [
    "Block",
    "Line",
    "is_unused",
    "scan_file",
    "scan_line",
    "scan_lines",
    "scan_text",
    "segment_blocks",
]
