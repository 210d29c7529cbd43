# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""NCM Compliance - flatten SolarWinds NCM compliance results into reports.

Decodes the SWIS compliance envelope (JSON records carrying embedded XML
detail) and flattens every rule pattern into one report row.

Quick Start:
    >>> from ncmcompliance import decode_compliance_records, flatten_records
    >>> records = decode_compliance_records(envelope_bytes)
    >>> violations = flatten_records(records)
    >>> violations[0].to_row()
    ('RTR-1', 'Rule-X', 'intf', 'no shutdown', 'True', '42')
"""

from ncmcompliance.decoder import decode_compliance_records, sanitize_payload
from ncmcompliance.enums import EnumSchemaVariant
from ncmcompliance.errors import ComplianceReportError, DecodeError, DetailParseError
from ncmcompliance.flattener import (
    flatten_detail,
    flatten_record,
    flatten_records,
    parse_compliance_detail,
)
from ncmcompliance.models import (
    ModelComplianceDetail,
    ModelComplianceRecord,
    ModelConfigBlock,
    ModelFoundLine,
    ModelPattern,
    ModelReportMetrics,
    ModelReportResult,
    ModelViolation,
)
from ncmcompliance.pipeline import run_report
from ncmcompliance.report import build_report_filename, write_violations_csv

__version__ = "0.2.0"

__all__ = [
    # Exceptions
    "ComplianceReportError",
    "DecodeError",
    "DetailParseError",
    # Types
    "EnumSchemaVariant",
    "ModelComplianceDetail",
    "ModelComplianceRecord",
    "ModelConfigBlock",
    "ModelFoundLine",
    "ModelPattern",
    "ModelReportMetrics",
    "ModelReportResult",
    "ModelViolation",
    # Main API
    "build_report_filename",
    "decode_compliance_records",
    "flatten_detail",
    "flatten_record",
    "flatten_records",
    "parse_compliance_detail",
    "run_report",
    "sanitize_payload",
    "write_violations_csv",
]
