from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_validator.cli.utils import load_gedcom, write_json
from gedcom_validator.core.exceptions import PipelineError
from gedcom_validator.exporter import build_report_dict

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export normalized records and diagnostics as JSON (stdout by default).
    """
    try:
        result = load_gedcom(gedcom, verbose=verbose)
    except PipelineError as exc:
        console.print(f"{gedcom}: {exc}", style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    write_json(build_report_dict(result), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
