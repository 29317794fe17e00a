"""
CLI command modules for gedcom_validator.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_validator.cli.commands.export import export_command
from gedcom_validator.cli.commands.report import report_command
from gedcom_validator.cli.commands.rules import rules_command

__all__ = [
    "export_command",
    "report_command",
    "rules_command",
]
