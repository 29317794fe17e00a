"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and CLI.
"""

from __future__ import annotations

from .json_exporter import build_report_dict, export_report_json, serialize_report

__all__ = ["build_report_dict", "export_report_json", "serialize_report"]
