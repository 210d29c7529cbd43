# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Source record decoding for the SWIS compliance envelope.

The envelope is a JSON array of compliance records, one per device/rule
evaluation, either bare (a saved query export) or wrapped in the SWIS query
response object ``{"results": [...]}``. Each record carries its compliance
detail as an opaque XML string in ``XMLResults``.

Before decoding, every ``&#xD;`` sequence is removed from the raw buffer.
The substitution runs over the whole buffer, not per field, so any other
field carrying the sequence (captions, rule names) is cleaned as well.

Decoding is pure: the same bytes always yield the same records, in source
order.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ncmcompliance.constants import CARRIAGE_RETURN_ARTIFACT, SWIS_RESULTS_KEY
from ncmcompliance.errors import DecodeError
from ncmcompliance.models.model_compliance_record import ModelComplianceRecord

logger = logging.getLogger(__name__)

_RECORD_LIST_ADAPTER: TypeAdapter[list[ModelComplianceRecord]] = TypeAdapter(
    list[ModelComplianceRecord]
)


def sanitize_payload(content: bytes) -> bytes:
    """Remove every ``&#xD;`` artifact from the raw envelope.

    Idempotent: sanitizing already-sanitized bytes returns them unchanged.

    Args:
        content: Raw envelope bytes.

    Returns:
        The bytes with all occurrences of the artifact removed.
    """
    return content.replace(CARRIAGE_RETURN_ARTIFACT, b"")


def _unwrap_envelope(payload: Any) -> Any:
    """Return the record array from a bare array or a SWIS response object."""
    if isinstance(payload, dict) and SWIS_RESULTS_KEY in payload:
        return payload[SWIS_RESULTS_KEY]
    return payload


def decode_compliance_records(content: bytes | str) -> list[ModelComplianceRecord]:
    """Decode the compliance envelope into typed records.

    Args:
        content: Raw envelope. ``str`` input is encoded as UTF-8 first.

    Returns:
        Records in source order. An empty array yields an empty list.

    Raises:
        DecodeError: If the buffer is not valid JSON, the top-level value is
            not a record array, or a record lacks ``NodeID``,
            ``NodeCaption`` or ``XMLResults``.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    sanitized = sanitize_payload(content)

    try:
        payload = json.loads(sanitized)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise DecodeError(f"envelope is not valid JSON: {e}") from e

    try:
        records = _RECORD_LIST_ADAPTER.validate_python(_unwrap_envelope(payload))
    except ValidationError as e:
        raise DecodeError(
            f"envelope does not match the compliance record shape "
            f"({e.error_count()} error(s)): {e}"
        ) from e

    logger.debug(
        "Decoded compliance envelope. records=%d, bytes=%d, stripped_bytes=%d",
        len(records),
        len(sanitized),
        len(content) - len(sanitized),
    )
    return records


__all__ = ["decode_compliance_records", "sanitize_payload"]
