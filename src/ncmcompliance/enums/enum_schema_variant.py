"""EnumSchemaVariant - report schema selection."""

from __future__ import annotations

from enum import Enum

from ncmcompliance.constants import FULL_REPORT_COLUMNS, MINIMAL_REPORT_COLUMNS


class EnumSchemaVariant(str, Enum):
    """Which flattening the report uses.

    Values:
        FULL: One row per pattern, six columns (node, rule, block, pattern,
            flag, line number).
        MINIMAL: One row per config block, two columns (node, interface).
            The block match label is the interface name.
    """

    FULL = "full"
    MINIMAL = "minimal"

    @property
    def columns(self) -> tuple[str, ...]:
        """Header row for this variant, in output order."""
        if self is EnumSchemaVariant.MINIMAL:
            return MINIMAL_REPORT_COLUMNS
        return FULL_REPORT_COLUMNS
