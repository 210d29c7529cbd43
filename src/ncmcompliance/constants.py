# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for the NCM compliance report.

Literal values of the SWIS envelope, the embedded compliance-detail XML and
the CSV report. The XML names are fixed by the vendor schema and must not
change.

Usage:
    from ncmcompliance.constants import FOUND_MATCH_TRUE

    if pattern.found_match_flag == FOUND_MATCH_TRUE:
        ...
"""

from typing import Final

# =============================================================================
# Envelope
# =============================================================================

CARRIAGE_RETURN_ARTIFACT: Final[bytes] = b"&#xD;"
"""
Escaped carriage return left behind by the device configuration text.

Interface names and pattern lines are cut straight out of the running
config, so they end in ``&#xD;``. Every occurrence is removed from the raw
envelope before decoding.
"""

SWIS_RESULTS_KEY: Final[str] = "results"
"""Key holding the record array in a SWIS query response."""

# =============================================================================
# Compliance detail XML
# =============================================================================

XML_CONFIG_BLOCK: Final[str] = "CB"
XML_CONFIG_BLOCK_LABEL_ATTR: Final[str] = "L"
XML_PATTERN_CONTAINER: Final[str] = "Ps"
XML_PATTERN: Final[str] = "P"
XML_FOUND_MATCH_ATTR: Final[str] = "FM"
XML_PATTERN_TEXT_ATTR: Final[str] = "PT"
XML_FOUND_LINE: Final[str] = "L"
XML_FOUND_LINE_TEXT_ATTR: Final[str] = "FL"
XML_FOUND_LINE_NUMBER_ATTR: Final[str] = "FLN"

FOUND_MATCH_TRUE: Final[str] = "True"
"""
Literal value of ``FM`` when a pattern matched.

Compared as a string; the flag is never coerced to ``bool`` so the report
echoes the vendor spelling unchanged.
"""

# =============================================================================
# Report
# =============================================================================

FULL_REPORT_COLUMNS: Final[tuple[str, ...]] = (
    "Node Name",
    "Rule Name",
    "Config Block Match",
    "Pattern Text",
    "In Violation",
    "Line Number",
)

MINIMAL_REPORT_COLUMNS: Final[tuple[str, ...]] = (
    "Node Name",
    "Interface Name",
)

REPORT_FILENAME_PREFIX: Final[str] = "ICE-Compliance-Report"

REPORT_TIMESTAMP_FORMAT: Final[str] = "%Y%m%d%H%M"
"""<year><month><day><hour><minute>, appended to the report filename."""

__all__ = [
    "CARRIAGE_RETURN_ARTIFACT",
    "FOUND_MATCH_TRUE",
    "FULL_REPORT_COLUMNS",
    "MINIMAL_REPORT_COLUMNS",
    "REPORT_FILENAME_PREFIX",
    "REPORT_TIMESTAMP_FORMAT",
    "SWIS_RESULTS_KEY",
    "XML_CONFIG_BLOCK",
    "XML_CONFIG_BLOCK_LABEL_ATTR",
    "XML_FOUND_LINE",
    "XML_FOUND_LINE_NUMBER_ATTR",
    "XML_FOUND_LINE_TEXT_ATTR",
    "XML_FOUND_MATCH_ATTR",
    "XML_PATTERN",
    "XML_PATTERN_CONTAINER",
    "XML_PATTERN_TEXT_ATTR",
]
