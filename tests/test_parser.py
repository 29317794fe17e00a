from __future__ import annotations

from datetime import date

import pytest

from gedcom_validator.config import GVConfig
from gedcom_validator.core.exceptions import (
    DanglingReferenceError,
    DateFormatError,
    DuplicateKeyError,
    GedcomParseError,
    GedcomSyntaxError,
    LevelMismatchError,
    MultipleAssignmentError,
    UnsupportedTagError,
)
from gedcom_validator.parser_core import GEDCOMParser, parse, parse_file
from gedcom_validator.utils import mock_file_path

FAMILY_TEXT = """0 HEAD
0 NOTE round trip sample
0 I1 INDI
1 NAME Joe /Smith/
1 SEX M
1 BIRT
2 DATE 15 JUL 1960
1 DEAT
2 DATE 31 DEC 2013
1 FAMS F1
0 I2 INDI
1 NAME Jennifer /Smith/
1 SEX F
1 BIRT
2 DATE 23 SEP 1960
1 FAMS F1
0 I3 INDI
1 NAME Dick /Smith/
1 SEX M
1 BIRT
2 DATE 13 FEB 1981
1 FAMC F1
0 I4 INDI
1 NAME Jane /Smith/
1 SEX F
1 BIRT
2 DATE 2 JUN 1983
1 FAMC F1
0 F1 FAM
1 HUSB I1
1 WIFE I2
1 CHIL I3
1 CHIL I4
1 MARR
2 DATE 14 FEB 1980
0 TRLR
"""


def test_parse_round_trip():
    registry = parse(FAMILY_TEXT)

    assert list(registry.indi) == ["I1", "I2", "I3", "I4"]
    assert list(registry.fami) == ["F1"]

    fam = registry.fami["F1"]
    assert fam.cids == ["I3", "I4"]
    assert fam.marriage == date(1980, 2, 14)
    assert registry.indi["I1"].death == date(2013, 12, 31)
    assert registry.indi["I3"].famc == "F1"


def test_parse_empty_text():
    registry = parse("")
    assert registry.indi == {}
    assert registry.fami == {}


def test_parse_header_only():
    registry = parse("0 HEAD\n0 TRLR\n")
    assert not registry.indi and not registry.fami


def test_malformed_line():
    with pytest.raises(GedcomSyntaxError):
        parse("A NOTE C")


def test_unsupported_record_tag():
    with pytest.raises(UnsupportedTagError) as excinfo:
        parse("0 FOO bar")
    assert "FOO" in str(excinfo.value)


def test_all_parse_failures_are_value_errors():
    with pytest.raises(ValueError):
        parse("0 FOO bar")
    assert issubclass(GedcomParseError, ValueError)


def test_duplicate_individual():
    text = FAMILY_TEXT.replace("0 I2 INDI", "0 I1 INDI")
    with pytest.raises(DuplicateKeyError) as excinfo:
        parse(text)
    assert str(excinfo.value) == "Duplicated individual: I1"


def test_level_mismatch_after_birth():
    text = FAMILY_TEXT.replace("2 DATE 15 JUL 1960", "1 DATE 15 JUL 1960")
    with pytest.raises(LevelMismatchError):
        parse(text)


def test_invalid_date():
    text = FAMILY_TEXT.replace("14 FEB 1980", "30 FEB 1980")
    with pytest.raises(DateFormatError):
        parse(text)


def test_multiple_assignment():
    text = FAMILY_TEXT.replace("1 SEX M\n1 BIRT\n2 DATE 15 JUL 1960", "1 SEX M\n1 SEX M\n1 BIRT\n2 DATE 15 JUL 1960")
    with pytest.raises(MultipleAssignmentError):
        parse(text)


def test_dangling_reference_checked_by_default():
    text = FAMILY_TEXT.replace("1 CHIL I4", "1 CHIL I9")
    with pytest.raises(DanglingReferenceError):
        parse(text)


def test_dangling_reference_check_can_be_disabled():
    text = FAMILY_TEXT.replace("1 CHIL I4", "1 CHIL I9")
    registry = parse(text, check_references=False)
    assert registry.fami["F1"].cids == ["I3", "I9"]


def test_parse_file_mock():
    registry = parse_file(mock_file_path("family.ged"))
    assert len(registry.indi) == 6
    assert len(registry.fami) == 2


def test_parser_object_reads_config(tmp_path):
    path = tmp_path / "dangling.ged"
    path.write_text(FAMILY_TEXT.replace("1 CHIL I4", "1 CHIL I9"), encoding="utf-8")

    strict = GEDCOMParser(config=GVConfig({}))
    with pytest.raises(DanglingReferenceError):
        strict.run(path)

    lenient = GEDCOMParser(config=GVConfig({"parser": {"check_references": False}}))
    registry = lenient.run(path)
    assert registry is lenient.registry
    assert "I9" in registry.fami["F1"].cids


def test_parser_debug_flag_defaults_to_config():
    assert GEDCOMParser(config=GVConfig({"debug": True})).debug is True
    assert GEDCOMParser(config=GVConfig({})).debug is False
    assert GEDCOMParser(config=GVConfig({"debug": True}), debug=False).debug is False
