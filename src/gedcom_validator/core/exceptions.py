from __future__ import annotations


class GedcomParseError(ValueError):
    """Base class for every fatal parse-time failure."""


class GedcomSyntaxError(GedcomParseError):
    """Raised when a line does not match ``<level> <token> [<rest>]``."""


class LevelMismatchError(GedcomParseError):
    """Raised when a BIRT/DEAT/MARR/DIV companion line is not ``2 DATE``."""


class DateFormatError(GedcomParseError):
    """Raised when a DATE argument is missing or cannot be parsed."""


class InvalidEnumError(GedcomParseError):
    """Raised when an enumerated argument (SEX) has an unknown value."""


class MultipleAssignmentError(GedcomParseError):
    """Raised when a single-valued tag appears twice in one record."""


class UnsupportedTagError(GedcomParseError):
    """Raised for tags outside the recognized INDI/FAM vocabulary."""


class DuplicateKeyError(GedcomParseError):
    """Raised when two records of the same kind share an identifier."""


class MissingMandatoryFieldError(GedcomParseError):
    """Raised when a record is constructed without its required fields."""


class DanglingReferenceError(GedcomParseError):
    """Raised when a record points at an identifier that was never defined."""


class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when parsing an input fails."""

    def __init__(self, message: str, input_path: str | None = None):
        super().__init__(message)
        self.input_path = input_path
