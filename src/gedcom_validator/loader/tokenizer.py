# src/gedcom_validator/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Union

from gedcom_validator.core.exceptions import GedcomSyntaxError

LINE_PATTERN = re.compile(r"^(\d+)\s+(\S+)\s*(.*)")

# Level-0 record markers that may follow the identifier ("0 I1 INDI").
REVERSE_TAGS: Dict[int, FrozenSet[str]] = {0: frozenset({"INDI", "FAM"})}

# Administrative level-0 lines that never produce a record.
UNUSED_TAGS: Dict[int, FrozenSet[str]] = {0: frozenset({"HEAD", "TRLR", "NOTE"})}


@dataclass(frozen=True)
class Line:
    """
    A single scanned GEDCOM line.

    Attributes:
        level: Parsed GEDCOM level (0, 1, 2, ...).
        tag: GEDCOM tag, e.g. "INDI", "NAME", "DATE".
        arg: The argument (payload) as a string (may be empty).
        lineno: 1-based line number in the input text (0 when unknown).
    """
    level: int
    tag: str
    arg: str = ""
    lineno: int = 0

    def __post_init__(self) -> None:
        if self.level < 0:
            raise GedcomSyntaxError(f"Line {self.lineno}: level must be non-negative -> {self.level}")
        if not self.tag:
            raise GedcomSyntaxError(f"Line {self.lineno}: tag must not be empty")

    def __str__(self) -> str:
        return f"{self.level} {self.tag} {self.arg}".rstrip()


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters."""
    return line.rstrip("\r\n")


def scan_line(raw: str, lineno: int = 0) -> Line:
    """
    Parse a single GEDCOM line into a Line.

    Token order is level dependent: for level 0, when the second token is a
    record marker (INDI/FAM) the marker becomes the tag and the first token
    the argument, so both "0 I1 INDI" and "0 INDI I1" read as tag INDI.

    Examples:
        "0 @I1@ INDI"      -> Line(0, "INDI", "@I1@")
        "1 NAME Joe /Doe/" -> Line(1, "NAME", "Joe /Doe/")
        "2 DATE 1 JAN 1900"
    """
    text = _strip_eol(raw)

    # Handle optional UTF-8 BOM on the very first line.
    if lineno <= 1 and text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    text = text.strip()
    match = LINE_PATTERN.match(text)
    if match is None:
        raise GedcomSyntaxError(f"GEDCOM Syntax Error at line {lineno}: {text}")

    level = int(match.group(1))
    first, rest = match.group(2), match.group(3)

    reversible = REVERSE_TAGS.get(level)
    if reversible and rest in reversible:
        return Line(level=level, tag=rest, arg=first, lineno=lineno)

    return Line(level=level, tag=first, arg=rest, lineno=lineno)


def is_unused(line: Line) -> bool:
    """Return True for administrative lines (HEAD/TRLR/NOTE at level 0)."""
    tags = UNUSED_TAGS.get(line.level)
    return bool(tags and line.tag in tags)


def scan_lines(raw_lines: Iterable[str]) -> List[Line]:
    """
    Scan every non-blank line and drop administrative level-0 lines.

    Line numbers are the 1-based physical positions, blanks included.
    """
    lines: List[Line] = []
    for lineno, raw in enumerate(raw_lines, start=1):
        if not raw.strip():
            # Skip truly blank lines; they are not meaningful in GEDCOM.
            continue
        line = scan_line(raw, lineno=lineno)
        if is_unused(line):
            continue
        lines.append(line)
    return lines


def scan_text(text: str) -> List[Line]:
    """Scan raw newline-separated GEDCOM text into Line records."""
    return scan_lines(text.splitlines())


def scan_file(path: Union[str, Path]) -> List[Line]:
    """
    Read and scan a GEDCOM file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        return scan_lines(f)
