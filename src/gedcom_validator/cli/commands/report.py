from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_validator.cli.utils import collect_inputs, load_gedcom
from gedcom_validator.config import get_config
from gedcom_validator.core.exceptions import PipelineError
from gedcom_validator.core.pipeline import PipelineResult
from gedcom_validator.dates import format_date, get_age
from gedcom_validator.normalization import NormalizedRecords

console = Console()

NA = "NA"


def _ids(ids: List[str]) -> str:
    return ", ".join(ids) if ids else NA


def individuals_table(records: NormalizedRecords, today: Optional[date] = None) -> Table:
    table = Table(title="Individuals")
    for column in ("ID", "Name", "Sex", "Birth", "Age", "Alive", "Death", "Child", "Spouse"):
        table.add_column(column, no_wrap=column == "ID")

    for ind in records.indi:
        table.add_row(
            ind.id,
            ind.name,
            ind.sex,
            format_date(ind.birth),
            str(get_age(ind.birth, ind.death or today)),
            str(ind.alive),
            format_date(ind.death),
            ind.famc or NA,
            _ids(ind.fams),
        )
    return table


def families_table(records: NormalizedRecords) -> Table:
    table = Table(title="Families")
    for column in (
        "ID", "Married", "Divorced", "Husband ID", "Husband Name", "Wife ID", "Wife Name", "Children"
    ):
        table.add_column(column, no_wrap=column == "ID")

    for fam in records.fami:
        table.add_row(
            fam.id,
            format_date(fam.marriage),
            format_date(fam.divorce),
            fam.hid,
            fam.hname or NA,
            fam.wid,
            fam.wname or NA,
            _ids(fam.cids),
        )
    return table


def print_result(path: Path, result: PipelineResult) -> None:
    console.rule(str(path))
    console.print(individuals_table(result.normalized))
    console.print(families_table(result.normalized))

    for message in result.report.errors:
        console.print(f"ERROR: {message}", style="red", markup=False, highlight=False, soft_wrap=True)
    for message in result.report.anomalies:
        console.print(f"ANOMALY: {message}", style="yellow", markup=False, highlight=False, soft_wrap=True)

    if result.report.clean:
        console.print("No errors or anomalies found.", style="green")


def report_command(
    files: Optional[List[Path]] = typer.Argument(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="GEDCOM files to check",
    ),
    directory: Optional[Path] = typer.Option(
        None,
        "--directory",
        "-d",
        exists=True,
        file_okay=False,
        help="Also check every .ged file in this directory",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print individuals, families, errors and anomalies for each GEDCOM file.
    """
    inputs = collect_inputs(files, directory)
    if not inputs:
        console.print("No GEDCOM files given.", style="red")
        raise typer.Exit(code=2)

    failed = False
    for path in inputs:
        try:
            result = load_gedcom(path, verbose=verbose)
        except PipelineError as exc:
            console.print(f"{path}: {exc}", style="red", markup=False, highlight=False, soft_wrap=True)
            failed = True
            continue

        print_result(path, result)
        if result.report.errors and get_config().fail_on_errors:
            failed = True

    if failed:
        raise typer.Exit(code=1)
