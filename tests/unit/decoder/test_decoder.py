# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for compliance envelope decoding.

Covers the ``&#xD;`` pre-pass, record field mapping, source order, the SWIS
``results`` wrapper and every DecodeError path.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ncmcompliance.decoder import decode_compliance_records, sanitize_payload
from ncmcompliance.errors import ComplianceReportError, DecodeError
from ncmcompliance.models.model_compliance_record import ModelComplianceRecord
from tests.fixtures.compliance_samples import (
    RTR1_DETAIL_XML,
    make_envelope,
    make_record,
)

# ---------------------------------------------------------------------------
# Sanitization
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSanitizePayload:
    """The carriage-return artifact is removed from the whole buffer."""

    def test_strips_every_occurrence(self) -> None:
        raw = b'["a&#xD;", "b&#xD;&#xD;c"]'
        assert sanitize_payload(raw) == b'["a", "bc"]'

    def test_is_idempotent(self) -> None:
        raw = b'{"NodeCaption": "Gi0/1&#xD;", "x": "&#xD;&#xD;"}'
        once = sanitize_payload(raw)
        assert sanitize_payload(once) == once

    def test_leaves_other_entities_alone(self) -> None:
        raw = b"&#xA; &amp; &#xd;"
        assert sanitize_payload(raw) == raw

    def test_empty_buffer(self) -> None:
        assert sanitize_payload(b"") == b""


# ---------------------------------------------------------------------------
# Successful decoding
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestDecodeRecords:
    """Well-formed envelopes decode into typed records."""

    def test_maps_swis_columns_to_fields(self, rtr1_envelope: bytes) -> None:
        records = decode_compliance_records(rtr1_envelope)

        assert records == [
            ModelComplianceRecord(
                node_id="1",
                node_caption="RTR-1",
                raw_detail=RTR1_DETAIL_XML,
                rule_name="Rule-X",
            )
        ]

    def test_empty_array_yields_no_records(self) -> None:
        assert decode_compliance_records(b"[]") == []

    def test_preserves_source_order(self) -> None:
        envelope = make_envelope(
            *(make_record(f"node-{i}", node_id=str(i)) for i in range(5))
        )
        records = decode_compliance_records(envelope)
        assert [r.node_caption for r in records] == [f"node-{i}" for i in range(5)]

    def test_strips_artifact_from_caption(self) -> None:
        envelope = make_envelope(make_record("Gi0/1&#xD;"))
        records = decode_compliance_records(envelope)
        assert records[0].node_caption == "Gi0/1"

    def test_strips_artifact_inside_detail(self) -> None:
        envelope = make_envelope(
            make_record(xml_results='<R><CB L="interface Gi0/2&#xD;"/></R>')
        )
        records = decode_compliance_records(envelope)
        assert records[0].raw_detail == '<R><CB L="interface Gi0/2"/></R>'

    def test_rule_name_is_optional(self) -> None:
        envelope = make_envelope(make_record(rule_name=None))
        records = decode_compliance_records(envelope)
        assert records[0].rule_name == ""

    def test_null_rule_name_becomes_empty(self) -> None:
        payload = [
            {
                "NodeID": "1",
                "NodeCaption": "RTR-1",
                "XMLResults": "<R/>",
                "RuleName": None,
            },
        ]
        records = decode_compliance_records(json.dumps(payload).encode())
        assert records[0].rule_name == ""

    def test_numeric_node_id_becomes_string(self) -> None:
        payload = [
            {"NodeID": 1234, "NodeCaption": "RTR-9", "XMLResults": "<R/>"},
        ]
        records = decode_compliance_records(json.dumps(payload).encode())
        assert records[0].node_id == "1234"

    def test_extra_columns_are_ignored(self) -> None:
        record = make_record()
        record["MachineType"] = "Cisco 3650"
        records = decode_compliance_records(make_envelope(record))
        assert records[0].node_caption == "RTR-1"

    def test_accepts_str_input(self, rtr1_envelope: bytes) -> None:
        records = decode_compliance_records(rtr1_envelope.decode("utf-8"))
        assert len(records) == 1

    def test_unwraps_swis_results_object(self) -> None:
        payload = {"results": [make_record("RTR-1"), make_record("RTR-2")]}
        records = decode_compliance_records(json.dumps(payload).encode())
        assert [r.node_caption for r in records] == ["RTR-1", "RTR-2"]

    def test_empty_swis_results_object(self) -> None:
        assert decode_compliance_records(b'{"results": []}') == []

    def test_is_deterministic(self, multi_device_envelope: bytes) -> None:
        first = decode_compliance_records(multi_device_envelope)
        second = decode_compliance_records(multi_device_envelope)
        assert first == second

    def test_records_are_immutable(self, rtr1_envelope: bytes) -> None:
        record = decode_compliance_records(rtr1_envelope)[0]
        with pytest.raises(ValidationError):
            record.node_caption = "changed"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# DecodeError paths
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestDecodeErrors:
    """Malformed envelopes raise DecodeError."""

    def test_malformed_json(self) -> None:
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_compliance_records(b'[{"NodeID": "1",')

    def test_invalid_utf8(self) -> None:
        with pytest.raises(DecodeError):
            decode_compliance_records(b'["\xff\xfe\xfa"]')

    def test_top_level_object_without_results(self) -> None:
        with pytest.raises(DecodeError, match="compliance record shape"):
            decode_compliance_records(b'{"NodeID": "1"}')

    def test_record_that_is_not_an_object(self) -> None:
        with pytest.raises(DecodeError):
            decode_compliance_records(b'["RTR-1"]')

    @pytest.mark.parametrize("missing", ["NodeID", "NodeCaption", "XMLResults"])
    def test_missing_required_field(self, missing: str) -> None:
        record = make_record()
        del record[missing]
        with pytest.raises(DecodeError):
            decode_compliance_records(make_envelope(record))

    def test_one_bad_record_fails_the_envelope(self) -> None:
        bad = make_record("RTR-2")
        del bad["XMLResults"]
        with pytest.raises(DecodeError):
            decode_compliance_records(make_envelope(make_record(), bad))

    def test_error_chains_original_cause(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_compliance_records(b"not json")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_decode_error_is_report_error(self) -> None:
        with pytest.raises(ComplianceReportError) as exc_info:
            decode_compliance_records(b"")
        assert exc_info.value.stage == "decode"
