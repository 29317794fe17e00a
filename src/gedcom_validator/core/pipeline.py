from __future__ import annotations

from dataclasses import dataclass

from gedcom_validator.core.context import ParseContext
from gedcom_validator.core.exceptions import ParseExecutionError
from gedcom_validator.exporter import export_report_json
from gedcom_validator.normalization import NormalizedRecords, normalize
from gedcom_validator.parser_core import GEDCOMParser
from gedcom_validator.registry.entities import GedcomRegistry
from gedcom_validator.validation import ValidationReport, validate


@dataclass
class PipelineResult:
    registry: GedcomRegistry
    normalized: NormalizedRecords
    report: ValidationReport


class Pipeline:
    """
    Orchestrates parse -> normalize -> validate for one input file.
    No business logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> PipelineResult:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            parser = GEDCOMParser(config=self.ctx.config, debug=self.ctx.debug)
            registry = parser.run(self.ctx.input_path)
            normalized = normalize(registry)
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc), input_path=self.ctx.input_path) from exc

        report = validate(registry.indi, registry.fami, today=self.ctx.today)
        result = PipelineResult(registry=registry, normalized=normalized, report=report)

        self.ctx.stats.update(
            individuals=len(registry.indi),
            families=len(registry.fami),
            errors=len(report.errors),
            anomalies=len(report.anomalies),
        )

        if self.ctx.output_path:
            export_report_json(result, self.ctx.output_path)

        self.log.info("Pipeline completed successfully")
        return result
