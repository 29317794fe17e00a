from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from logging import Logger
from typing import Dict, Optional

from gedcom_validator.config import GVConfig


@dataclass
class ParseContext:
    """
    Per-file run state handed from the CLI to the pipeline.

    ``today`` pins the validation date; None uses the real current date.
    ``stats`` is filled by the pipeline with record and diagnostic counts.
    """

    config: GVConfig
    logger: Logger

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    today: Optional[date] = None

    stats: Dict[str, int] = field(default_factory=dict)
    debug: bool = False
