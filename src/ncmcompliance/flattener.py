# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Violation flattening for NCM compliance records.

Parses each record's ``XMLResults`` payload into a ModelComplianceDetail and
walks it depth-first, emitting one ModelViolation per leaf. Device and rule
context from the record is copied into every row.

Walk Order:
    record order -> ``CB`` order -> ``P`` order (document order, stable).
    Nothing is sorted or deduplicated.

Found Line Rule:
    The ``FM`` flag is compared as a string against ``"True"``. Only a
    matching pattern reads the ``FLN`` of its ``L`` child; every other
    pattern gets ``""``, even if an ``L`` element happens to be present.
    A missing ``L`` on a matching pattern also yields ``""``. When a pattern
    has several ``L`` children the last one is used.

Schema Variants:
    FULL emits one row per pattern. MINIMAL emits one row per config block
    and ignores patterns; it is the same walk stopped one level earlier.

Failure Policy:
    A malformed payload raises DetailParseError and aborts the batch. No
    partial list is returned.

Payloads come from an external system, so they are parsed with
``defusedxml`` (entity expansion and external references are refused).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from xml.etree.ElementTree import Element, ParseError

from defusedxml.ElementTree import fromstring

from ncmcompliance.constants import (
    FOUND_MATCH_TRUE,
    XML_CONFIG_BLOCK,
    XML_CONFIG_BLOCK_LABEL_ATTR,
    XML_FOUND_LINE,
    XML_FOUND_LINE_NUMBER_ATTR,
    XML_FOUND_LINE_TEXT_ATTR,
    XML_FOUND_MATCH_ATTR,
    XML_PATTERN,
    XML_PATTERN_CONTAINER,
    XML_PATTERN_TEXT_ATTR,
)
from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant
from ncmcompliance.errors import DetailParseError
from ncmcompliance.models.model_compliance_detail import (
    ModelComplianceDetail,
    ModelConfigBlock,
    ModelFoundLine,
    ModelPattern,
)
from ncmcompliance.models.model_compliance_record import ModelComplianceRecord
from ncmcompliance.models.model_violation import ModelViolation

logger = logging.getLogger(__name__)


# =========================================================================
# Parsing
# =========================================================================


def _parse_found_line(element: Element | None) -> ModelFoundLine | None:
    if element is None:
        return None
    return ModelFoundLine(
        line_match_text=element.get(XML_FOUND_LINE_TEXT_ATTR, ""),
        line_number=element.get(XML_FOUND_LINE_NUMBER_ATTR, ""),
    )


def _parse_pattern(element: Element) -> ModelPattern:
    # Repeated <L> children overwrite each other; the last one wins
    found_lines = element.findall(XML_FOUND_LINE)
    return ModelPattern(
        found_match_flag=element.get(XML_FOUND_MATCH_ATTR, ""),
        pattern_text=element.get(XML_PATTERN_TEXT_ATTR, ""),
        found_line=_parse_found_line(found_lines[-1] if found_lines else None),
    )


def _parse_config_block(element: Element) -> ModelConfigBlock:
    # Patterns live under every <Ps> container, direct children only
    patterns = tuple(
        _parse_pattern(pattern)
        for container in element.findall(XML_PATTERN_CONTAINER)
        for pattern in container.findall(XML_PATTERN)
    )
    return ModelConfigBlock(
        block_match_label=element.get(XML_CONFIG_BLOCK_LABEL_ATTR, ""),
        patterns=patterns,
    )


def parse_compliance_detail(raw_detail: str) -> ModelComplianceDetail:
    """Parse an ``XMLResults`` payload into the three-level detail tree.

    Only direct children are read at each level: ``CB`` under the root,
    ``Ps`` under ``CB``, ``P`` under ``Ps`` and ``L`` under ``P``. Missing
    attributes read as ``""``.

    Args:
        raw_detail: The embedded XML document.

    Returns:
        Parsed detail, blocks and patterns in document order.

    Raises:
        DetailParseError: If the payload is empty, not well-formed, or uses
            constructs refused by defusedxml.
    """
    try:
        root = fromstring(raw_detail)
    except ParseError as e:
        raise DetailParseError(f"compliance detail is not well-formed XML: {e}") from e
    except ValueError as e:
        # defusedxml rejections (DTDs, entities) subclass ValueError
        raise DetailParseError(f"compliance detail was rejected: {e}") from e

    return ModelComplianceDetail(
        config_blocks=tuple(
            _parse_config_block(block) for block in root.findall(XML_CONFIG_BLOCK)
        )
    )


# =========================================================================
# Flattening
# =========================================================================


def _found_line_number(pattern: ModelPattern) -> str:
    """Return FLN for a matching pattern, ``""`` otherwise."""
    if pattern.found_match_flag != FOUND_MATCH_TRUE:
        return ""
    if pattern.found_line is None:
        return ""
    return pattern.found_line.line_number


def flatten_detail(
    record: ModelComplianceRecord,
    detail: ModelComplianceDetail,
    *,
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL,
) -> list[ModelViolation]:
    """Flatten an already-parsed detail tree using ``record`` for context.

    Args:
        record: Owning record; supplies node name and rule name.
        detail: Parsed compliance detail of ``record``.
        variant: Schema variant to flatten against.

    Returns:
        Violations in block order, then pattern order.
    """
    if variant is EnumSchemaVariant.MINIMAL:
        return [
            ModelViolation(
                node_name=record.node_caption,
                rule_name=record.rule_name,
                config_block_match=block.block_match_label,
            )
            for block in detail.config_blocks
        ]

    violations: list[ModelViolation] = []
    for block in detail.config_blocks:
        for pattern in block.patterns:
            violations.append(
                ModelViolation(
                    node_name=record.node_caption,
                    rule_name=record.rule_name,
                    config_block_match=block.block_match_label,
                    pattern_text=pattern.pattern_text,
                    in_violation=pattern.found_match_flag,
                    found_line_number=_found_line_number(pattern),
                )
            )
    return violations


def flatten_record(
    record: ModelComplianceRecord,
    *,
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL,
) -> list[ModelViolation]:
    """Parse one record's detail and flatten it into violations.

    Args:
        record: Decoded compliance record.
        variant: Schema variant to flatten against.

    Returns:
        Zero or more violations in document order.

    Raises:
        DetailParseError: If ``record.raw_detail`` is malformed. The error
            names the record's node.
    """
    try:
        detail = parse_compliance_detail(record.raw_detail)
    except DetailParseError as e:
        raise DetailParseError(
            e.message,
            node_id=record.node_id,
            node_caption=record.node_caption,
        ) from e

    violations = flatten_detail(record, detail, variant=variant)
    logger.debug(
        "Flattened compliance record. node=%s, rule=%s, blocks=%d, violations=%d",
        record.node_caption,
        record.rule_name,
        len(detail.config_blocks),
        len(violations),
    )
    return violations


def flatten_records(
    records: Iterable[ModelComplianceRecord],
    *,
    variant: EnumSchemaVariant = EnumSchemaVariant.FULL,
) -> list[ModelViolation]:
    """Flatten a batch of records, concatenated in input order.

    The first malformed record aborts the whole batch; its DetailParseError
    propagates and no violations are returned.

    Args:
        records: Decoded records, in envelope order.
        variant: Schema variant to flatten against.

    Returns:
        All violations: record order, then block order, then pattern order.

    Raises:
        DetailParseError: If any record's detail is malformed.
    """
    violations: list[ModelViolation] = []
    for record in records:
        violations.extend(flatten_record(record, variant=variant))
    return violations


__all__ = [
    "flatten_detail",
    "flatten_record",
    "flatten_records",
    "parse_compliance_detail",
]
