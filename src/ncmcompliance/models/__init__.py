"""Models for the compliance report."""

from ncmcompliance.models.model_compliance_detail import (
    ModelComplianceDetail,
    ModelConfigBlock,
    ModelFoundLine,
    ModelPattern,
)
from ncmcompliance.models.model_compliance_record import ModelComplianceRecord
from ncmcompliance.models.model_report_result import (
    ModelReportMetrics,
    ModelReportResult,
)
from ncmcompliance.models.model_violation import ModelViolation

__all__ = [
    "ModelComplianceDetail",
    "ModelComplianceRecord",
    "ModelConfigBlock",
    "ModelFoundLine",
    "ModelPattern",
    "ModelReportMetrics",
    "ModelReportResult",
    "ModelViolation",
]
