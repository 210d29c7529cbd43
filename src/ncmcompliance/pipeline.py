# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Report pipeline: decode -> flatten -> write.

Runs the whole batch in one synchronous pass. Failures keep their original
exception type and gain a note naming the stage that failed:

    DecodeError        -> "decoding compliance results"
    DetailParseError   -> "flattening violations"
    OSError (writing)  -> "saving violations"

A flattening failure happens before anything is written, so a failed run
never leaves a truncated report behind.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path

from ncmcompliance.decoder import decode_compliance_records
from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant
from ncmcompliance.errors import DecodeError, DetailParseError
from ncmcompliance.flattener import flatten_records
from ncmcompliance.models.model_compliance_record import ModelComplianceRecord
from ncmcompliance.models.model_report_result import (
    ModelReportMetrics,
    ModelReportResult,
)
from ncmcompliance.report import build_report_filename, write_violations_csv

logger = logging.getLogger(__name__)

STAGE_NOTE_DECODE = "decoding compliance results"
STAGE_NOTE_FLATTEN = "flattening violations"
STAGE_NOTE_WRITE = "saving violations"


def _filter_by_rule(
    records: list[ModelComplianceRecord], rule_name: str | None
) -> list[ModelComplianceRecord]:
    if not rule_name:
        return records
    return [record for record in records if record.rule_name == rule_name]


def run_report(
    content: bytes | str,
    *,
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL,
    output_dir: Path | None = None,
    rule_name: str | None = None,
    now: datetime | None = None,
    collect_metrics: bool = False,
) -> ModelReportResult:
    """Decode an envelope, flatten every record and optionally write the CSV.

    Args:
        content: Raw envelope bytes (file contents or a SWIS query response).
        variant: Schema variant to flatten against.
        output_dir: Directory for the CSV report. Nothing is written if None.
        rule_name: Keep only records whose rule name equals this value.
        now: Timestamp for the report filename. Defaults to local time.
        collect_metrics: If True, populate ``result.metrics``.

    Returns:
        ModelReportResult with violations in record/block/pattern order.

    Raises:
        DecodeError: The envelope is malformed. Nothing is flattened.
        DetailParseError: A record's detail is malformed. Nothing is written.
        OSError: The report could not be written.
    """
    start_time = time.perf_counter()

    try:
        records = decode_compliance_records(content)
    except DecodeError as e:
        e.add_note(STAGE_NOTE_DECODE)
        raise

    selected = _filter_by_rule(records, rule_name)
    if rule_name:
        logger.debug(
            "Applied rule filter. rule=%s, kept=%d, total=%d",
            rule_name,
            len(selected),
            len(records),
        )

    try:
        violations = flatten_records(selected, variant=variant)
    except DetailParseError as e:
        e.add_note(STAGE_NOTE_FLATTEN)
        raise

    logger.info(
        "Flattened report. records=%d, violations=%d",
        len(selected),
        len(violations),
    )

    output_path: Path | None = None
    if output_dir is not None:
        output_path = output_dir / build_report_filename(now or datetime.now())
        try:
            write_violations_csv(violations, output_path, variant=variant)
        except OSError as e:
            e.add_note(STAGE_NOTE_WRITE)
            raise

    metrics: ModelReportMetrics | None = None
    if collect_metrics:
        metrics = ModelReportMetrics(
            duration_ms=int((time.perf_counter() - start_time) * 1000),
            nodes_reported=len({v.node_name for v in violations}),
            violations_in_violation=sum(1 for v in violations if v.is_match),
        )

    return ModelReportResult(
        violations=violations,
        records_decoded=len(records),
        variant=variant,
        output_path=output_path,
        metrics=metrics,
    )


__all__ = [
    "STAGE_NOTE_DECODE",
    "STAGE_NOTE_FLATTEN",
    "STAGE_NOTE_WRITE",
    "run_report",
]
