from __future__ import annotations

import typer

from gedcom_validator.cli.commands.export import export_command
from gedcom_validator.cli.commands.report import report_command
from gedcom_validator.cli.commands.rules import rules_command

app = typer.Typer(
    name="gedcom-validator",
    help="GEDCOM family-tree validator, reporter, and exporter",
    add_completion=False,
)

app.command("report")(report_command)
app.command("export")(export_command)
app.command("rules")(rules_command)


def main():
    app()


if __name__ == "__main__":
    main()
