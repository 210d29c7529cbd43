# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Compliance record model decoded from the SWIS envelope."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelComplianceRecord(BaseModel):
    """One device's rule evaluation result, as returned by the NCM query.

    JSON keys follow the SWIS column names (``NodeID``, ``NodeCaption``,
    ``XMLResults``, ``RuleName``); the Python field names are used
    everywhere else.

    Attributes:
        node_id: Opaque NCM node identifier.
        node_caption: Human-readable device name.
        raw_detail: Embedded compliance-detail XML, already stripped of the
            ``&#xD;`` artifact.
        rule_name: Name of the evaluated rule. Empty when the query did not
            select it.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    node_id: str = Field(..., alias="NodeID")
    node_caption: str = Field(..., alias="NodeCaption")
    raw_detail: str = Field(..., alias="XMLResults")
    rule_name: str = Field(default="", alias="RuleName")

    @field_validator("rule_name", mode="before")
    @classmethod
    def _null_rule_name_is_empty(cls, value: object) -> object:
        """SWIS returns NULL columns as JSON null."""
        return "" if value is None else value


__all__ = ["ModelComplianceRecord"]
