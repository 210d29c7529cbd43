# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CSV report writer for flattened violations."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import TextIO

from ncmcompliance.constants import REPORT_FILENAME_PREFIX, REPORT_TIMESTAMP_FORMAT
from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant
from ncmcompliance.models.model_violation import ModelViolation

logger = logging.getLogger(__name__)


def build_report_filename(now: datetime) -> str:
    """Return the report filename for ``now``.

    Example:
        >>> build_report_filename(datetime(2026, 3, 1, 9, 5))
        'ICE-Compliance-Report_202603010905.csv'
    """
    return f"{REPORT_FILENAME_PREFIX}_{now.strftime(REPORT_TIMESTAMP_FORMAT)}.csv"


def _write_rows(
    stream: TextIO,
    violations: Iterable[ModelViolation],
    variant: EnumSchemaVariant,
) -> int:
    writer = csv.writer(stream)
    writer.writerow(variant.columns)
    count = 0
    for violation in violations:
        writer.writerow(violation.to_row(variant))
        count += 1
    return count


def write_violations_csv(
    violations: Iterable[ModelViolation],
    destination: Path | TextIO,
    *,
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL,
) -> int:
    """Write the header row and one row per violation.

    Args:
        violations: Rows to write, in order.
        destination: File path (parent directories are created) or an open
            text stream. Streams are not closed.
        variant: Selects the header and the row projection.

    Returns:
        Number of data rows written (header excluded).
    """
    if isinstance(destination, Path):
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", newline="", encoding="utf-8") as f:
            count = _write_rows(f, violations, variant)
        logger.info("Wrote %d violation row(s) to %s", count, destination)
        return count

    return _write_rows(destination, violations, variant)


__all__ = ["build_report_filename", "write_violations_csv"]
