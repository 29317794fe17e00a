from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gedcom_validator.validation import rule_catalogue

console = Console()


def rules_command():
    """
    List every validation rule with its kind.
    """
    table = Table(title="Validation Rules")
    table.add_column("Code", style="bold", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Summary")

    for rule in rule_catalogue():
        kind_style = "red" if rule.kind == "error" else "yellow"
        table.add_row(rule.code, f"[{kind_style}]{rule.kind}[/{kind_style}]", rule.summary)

    console.print(table)
