"""
Pytest configuration and fixtures for ncmcompliance tests.

Shared sample envelopes and compliance-detail payloads. Builders live in
tests.fixtures.compliance_samples so test modules can import them directly.
"""

import pytest

from tests.fixtures.compliance_samples import (
    RTR1_DETAIL_XML,
    make_envelope,
    make_record,
)

# =========================================================================
# Sample Data Fixtures
# =========================================================================


@pytest.fixture
def rtr1_detail_xml() -> str:
    """Compliance detail for the RTR-1 example device."""
    return RTR1_DETAIL_XML


@pytest.fixture
def rtr1_envelope() -> bytes:
    """Envelope with a single RTR-1 record evaluated against Rule-X."""
    return make_envelope(make_record())


@pytest.fixture
def multi_device_envelope() -> bytes:
    """Envelope with three devices in varying block/pattern layouts.

    Expected rows, in order: SW-A/a1/p1, SW-A/a1/p2, SW-B/b1/p3, SW-B/b2/p4.
    SW-C has no config blocks.
    """
    return make_envelope(
        make_record(
            "SW-A",
            '<R><CB L="a1"><Ps><P FM="True" PT="p1"><L FL="x" FLN="1"/></P>'
            '<P FM="False" PT="p2"/></Ps></CB></R>',
            node_id="10",
        ),
        make_record(
            "SW-B",
            '<R><CB L="b1"><Ps><P FM="False" PT="p3"/></Ps></CB>'
            '<CB L="b2"><Ps><P FM="True" PT="p4"><L FL="y" FLN="7"/></P>'
            "</Ps></CB></R>",
            node_id="11",
        ),
        make_record("SW-C", "<R/>", node_id="12"),
    )
