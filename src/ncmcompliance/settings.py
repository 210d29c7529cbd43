# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Report configuration loaded from the environment.

Environment variables:
    NCM_REPORT_INPUT_FILE: envelope JSON file (default: read stdin)
    NCM_REPORT_OUTPUT_DIR: directory for the CSV report (default ".")
    NCM_REPORT_RULE_NAME: keep only records for this rule (default: all)
    NCM_REPORT_SCHEMA_VARIANT: "full" or "minimal" (default "full")
    NCM_REPORT_LOG_LEVEL: logging level name (default "INFO")
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant


class ComplianceReportSettings(BaseSettings):
    """Pydantic Settings for the compliance report, loaded from environment.

    Command-line flags take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="NCM_REPORT_",
        extra="ignore",
    )

    input_file: Path | None = Field(
        default=None,
        description="Envelope JSON file; stdin is read when unset",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory the CSV report is written to",
    )
    rule_name: str | None = Field(
        default=None,
        description="Only report records for this rule name",
    )
    schema_variant: EnumSchemaVariant = Field(
        default=EnumSchemaVariant.FULL,
        description="Report schema variant",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name",
    )

    def resolved_log_level(self) -> int:
        """Return the numeric log level, falling back to INFO if invalid."""
        level = getattr(logging, self.log_level.upper(), None)
        if not isinstance(level, int):
            return logging.INFO
        return level


__all__ = ["ComplianceReportSettings"]
