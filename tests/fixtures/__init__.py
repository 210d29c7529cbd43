# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared test fixtures and constants for ncmcompliance tests.

Modules:
    compliance_samples: Envelope and compliance-detail builders
"""

from tests.fixtures.compliance_samples import (
    RTR1_DETAIL_XML,
    make_envelope,
    make_record,
)

__all__ = [
    "RTR1_DETAIL_XML",
    "make_envelope",
    "make_record",
]
