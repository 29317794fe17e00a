"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from gedcom_validator.config import get_config
from gedcom_validator.loader.segmenter import segment_blocks
from gedcom_validator.loader.tokenizer import Line, scan_file, scan_text
from gedcom_validator.logging import get_logger
from gedcom_validator.registry.build_registry import build_registry
from gedcom_validator.registry.entities import GedcomRegistry

log = get_logger("parser_core")


def _assemble(lines: List[Line], check_references: bool) -> GedcomRegistry:
    blocks = segment_blocks(lines)
    registry = build_registry(blocks)

    if check_references:
        registry.check_references()

    log.debug(
        "Parsed %d lines into %d blocks (INDI=%d, FAM=%d)",
        len(lines),
        len(blocks),
        len(registry.indi),
        len(registry.fami),
    )
    return registry


def parse(text: str, *, check_references: bool = True) -> GedcomRegistry:
    """
    Parse raw GEDCOM text into a registry of individuals and families.

    Fail-fast: the first malformed line or record raises a
    ``GedcomParseError`` subclass and no partial result is returned.
    """
    return _assemble(scan_text(text), check_references)


def parse_file(path: Union[str, Path], *, check_references: bool = True) -> GedcomRegistry:
    """Scan and parse a GEDCOM file from disk."""
    return _assemble(scan_file(path), check_references)


class GEDCOMParser:
    """
    High-level parser:
      - loads file
      - scans lines
      - groups blocks
      - builds the individual/family registry
    """

    def __init__(self, config=None, debug: bool | None = None):
        self.cfg = config if config is not None else get_config()
        self.debug = bool(self.cfg.debug) if debug is None else debug
        self.log = get_logger("parser_core")

        self.lines: List[Line] = []
        self.registry: GedcomRegistry | None = None

        self.log.debug("Parser engine initialized.")

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> None:
        """Scan GEDCOM input into a list of lines."""
        self.log.info(f"Scanning GEDCOM input: {path}")
        try:
            self.lines = scan_file(path)
        except Exception:
            self.log.exception("Scanning failed.")
            raise

        if self.debug:
            self.log.debug(f"Line count = {len(self.lines)}")

    # ---------------------------------------------------------
    # Build registry
    # ---------------------------------------------------------
    def run(self, input_path: Union[str, Path]) -> GedcomRegistry:
        """
        Full parse sequence.
        Returns: registry
        """
        self.load_file(input_path)

        self.log.info("Running parser engine...")

        try:
            self.registry = _assemble(self.lines, self.cfg.check_references)
        except Exception:
            self.log.exception("Parser run failed.")
            raise

        self.log.info(
            "Parser run completed: %d individuals, %d families.",
            len(self.registry.indi),
            len(self.registry.fami),
        )
        return self.registry
