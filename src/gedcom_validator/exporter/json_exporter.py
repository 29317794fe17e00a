"""
json_exporter.py
Structured JSON exporter for pipeline results.

This exporter:
- Converts dataclasses and dates to plain dictionaries and ISO strings
- Emits records in normalized (id-sorted) order
- Carries the validation diagnostics alongside the records
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict

from gedcom_validator.logging import get_logger

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dates -> ISO strings
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, date):
        return obj.isoformat()

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_report_dict(result: Any) -> Dict[str, Any]:
    """
    Convert a ``PipelineResult`` into a JSON-safe dict.
    """
    normalized = result.normalized
    report = result.report
    return {
        "counts": {
            "individuals": len(normalized.indi),
            "families": len(normalized.fami),
            "errors": len(report.errors),
            "anomalies": len(report.anomalies),
        },
        "individuals": [_to_json_compatible(ind) for ind in normalized.indi],
        "families": [_to_json_compatible(fam) for fam in normalized.fami],
        "errors": list(report.errors),
        "anomalies": list(report.anomalies),
    }


def serialize_report(result: Any, indent: int | None = 2) -> str:
    return json.dumps(
        build_report_dict(result),
        indent=indent,
        ensure_ascii=False,
    )


def export_report_json(result: Any, output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting report JSON to: %s (INDI=%d, FAM=%d, errors=%d, anomalies=%d)",
        output_path,
        len(result.normalized.indi),
        len(result.normalized.fami),
        len(result.report.errors),
        len(result.report.anomalies),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_report(result, indent=indent))

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
