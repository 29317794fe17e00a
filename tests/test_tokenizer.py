# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_validator.core.exceptions import GedcomSyntaxError
from gedcom_validator.loader import Line, scan_file, scan_line, scan_text
from gedcom_validator.utils import mock_file_path


def test_scan_line_field_with_argument() -> None:
    line = scan_line("1 NAME Joe /Smith/", lineno=3)
    assert line == Line(level=1, tag="NAME", arg="Joe /Smith/", lineno=3)


def test_scan_line_reverses_record_marker() -> None:
    line = scan_line("0 I1 INDI")
    assert line.level == 0
    assert line.tag == "INDI"
    assert line.arg == "I1"


def test_scan_line_accepts_marker_first() -> None:
    line = scan_line("0 FAM F1")
    assert line.tag == "FAM"
    assert line.arg == "F1"


def test_scan_line_only_reverses_at_level_zero() -> None:
    line = scan_line("1 HUSB INDI")
    assert line.tag == "HUSB"
    assert line.arg == "INDI"


def test_scan_line_tag_only() -> None:
    line = scan_line("1 BIRT")
    assert line.tag == "BIRT"
    assert line.arg == ""


def test_scan_line_strips_bom_on_first_line() -> None:
    line = scan_line("\ufeff0 HEAD", lineno=1)
    assert line.level == 0
    assert line.tag == "HEAD"


def test_scan_line_tolerates_crlf_and_padding() -> None:
    line = scan_line("  2 DATE 1 JAN 1900 \r\n", lineno=4)
    assert line.tag == "DATE"
    assert line.arg == "1 JAN 1900"


@pytest.mark.parametrize("raw", ["A NOTE C", "0", "NAME Joe", "-1 NAME Joe"])
def test_scan_line_malformed_raises(raw: str) -> None:
    with pytest.raises(GedcomSyntaxError) as excinfo:
        scan_line(raw, lineno=7)
    assert "line 7" in str(excinfo.value)


def test_line_rejects_negative_level() -> None:
    with pytest.raises(GedcomSyntaxError):
        Line(level=-1, tag="NAME")


def test_line_rejects_empty_tag() -> None:
    with pytest.raises(GedcomSyntaxError):
        Line(level=1, tag="")


def test_line_str() -> None:
    assert str(Line(1, "SEX", "M")) == "1 SEX M"
    assert str(Line(1, "BIRT")) == "1 BIRT"


def test_scan_text_drops_admin_lines_and_blanks() -> None:
    text = "0 HEAD\n\n0 NOTE hello\n0 I1 INDI\n1 SEX M\n0 TRLR\n"
    lines = scan_text(text)
    assert [(l.level, l.tag) for l in lines] == [(0, "INDI"), (1, "SEX")]
    # physical line numbers survive the filtering
    assert [l.lineno for l in lines] == [4, 5]


def test_scan_text_keeps_nested_note() -> None:
    lines = scan_text("0 I1 INDI\n1 NOTE kept\n")
    assert lines[1].tag == "NOTE"


def test_scan_text_crlf() -> None:
    lines = scan_text("0 I1 INDI\r\n1 SEX F\r\n")
    assert lines[1].arg == "F"


def test_scan_file_reads_mock_file() -> None:
    lines = scan_file(mock_file_path("family.ged"))
    assert lines[0] == Line(level=0, tag="INDI", arg="I1", lineno=3)
    assert all(not (l.level == 0 and l.tag in {"HEAD", "NOTE", "TRLR"}) for l in lines)


def test_scan_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_file(tmp_path / "missing.ged")
