from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from rich.console import Console

from gedcom_validator.config import get_config
from gedcom_validator.core.context import ParseContext
from gedcom_validator.core.pipeline import Pipeline, PipelineResult
from gedcom_validator.logging import get_logger
from gedcom_validator.utils.pathing import gedcom_files_in

console = Console()


def load_gedcom(path: Path, *, verbose: bool = False) -> PipelineResult:
    """
    Parse, normalize and validate one file.

    Raises:
        PipelineError: the file could not be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    cfg = get_config()
    ctx = ParseContext(
        config=cfg,
        logger=get_logger("pipeline"),
        input_path=str(path),
        debug=bool(cfg.debug),
    )
    result = Pipeline(ctx).run()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {path.name} in {elapsed:.2f}s ({ctx.stats})")

    return result


def collect_inputs(files: Optional[Iterable[Path]], directory: Optional[Path]) -> List[Path]:
    """Explicit files first, then the ``.ged`` files of ``directory``."""
    inputs = list(files or [])
    if directory is not None:
        inputs.extend(gedcom_files_in(directory))
    return inputs


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
