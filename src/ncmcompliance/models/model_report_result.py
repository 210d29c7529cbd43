"""ModelReportResult - result of a report run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant
from ncmcompliance.models.model_violation import ModelViolation


@dataclass
class ModelReportMetrics:
    """Metrics about a report run.

    Attributes:
        duration_ms: Time taken for decode, flatten and write in milliseconds.
        nodes_reported: Distinct node names among the rows.
        violations_in_violation: Rows whose flag is the match indicator.
    """

    duration_ms: int = 0
    nodes_reported: int = 0
    violations_in_violation: int = 0


@dataclass
class ModelReportResult:
    """Result of a report run.

    Attributes:
        violations: Flattened rows, in record/block/pattern order.
        records_decoded: Number of records decoded from the envelope
            (before any rule filter).
        variant: Schema variant the rows were flattened against.
        output_path: CSV file written, or None when nothing was written.
        metrics: Optional detailed metrics about the run.
    """

    violations: list[ModelViolation]
    records_decoded: int
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL
    output_path: Path | None = None
    metrics: ModelReportMetrics | None = None

    @property
    def violation_count(self) -> int:
        """Return the number of flattened rows."""
        return len(self.violations)
