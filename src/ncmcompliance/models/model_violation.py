# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelViolation - one flattened report row."""

from __future__ import annotations

from dataclasses import dataclass

from ncmcompliance.constants import FOUND_MATCH_TRUE
from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant


@dataclass(frozen=True)
class ModelViolation:
    """One flattened row combining device, rule, block and pattern context.

    In the MINIMAL variant a violation stands for a whole config block, so
    ``pattern_text``, ``in_violation`` and ``found_line_number`` are empty.

    Attributes:
        node_name: Caption of the owning device.
        rule_name: Rule the device was evaluated against.
        config_block_match: Label of the owning config block.
        pattern_text: Pattern description.
        in_violation: Raw found-match flag, not coerced to bool.
        found_line_number: Line number of the match, or ``""`` when the
            pattern did not match.
    """

    node_name: str
    rule_name: str
    config_block_match: str
    pattern_text: str = ""
    in_violation: str = ""
    found_line_number: str = ""

    @property
    def is_match(self) -> bool:
        """Return True if the pattern flag is the literal match indicator."""
        return self.in_violation == FOUND_MATCH_TRUE

    def to_row(
        self, variant: EnumSchemaVariant = EnumSchemaVariant.FULL
    ) -> tuple[str, ...]:
        """Project onto the column order of ``variant.columns``."""
        if variant is EnumSchemaVariant.MINIMAL:
            return (self.node_name, self.config_block_match)
        return (
            self.node_name,
            self.rule_name,
            self.config_block_match,
            self.pattern_text,
            self.in_violation,
            self.found_line_number,
        )

    def to_dict(
        self, variant: EnumSchemaVariant = EnumSchemaVariant.FULL
    ) -> dict[str, str]:
        """Serialize as a column-name keyed dict (JSON output)."""
        return dict(zip(variant.columns, self.to_row(variant), strict=True))


__all__ = ["ModelViolation"]
