# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Error types for the compliance report pipeline.

Both errors are terminal for the current run. A report that silently drops
one device's violations misstates the compliance posture of the whole
estate, so neither error is skipped or retried inside the package; the
caller decides how to surface them (the CLI exits non-zero).

Stage context is attached with ``BaseException.add_note`` by
``ncmcompliance.pipeline`` so the original exception type survives.
"""

from __future__ import annotations

__all__ = ["ComplianceReportError", "DecodeError", "DetailParseError"]


class ComplianceReportError(Exception):
    """Base exception for all compliance report errors.

    Attributes:
        message: Human-readable error message.
        stage: Pipeline stage that raised the error.
    """

    stage: str = "report"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DecodeError(ComplianceReportError):
    """The envelope bytes do not conform to the compliance record encoding.

    Raised for malformed JSON, a top-level value that is not a record array,
    or a record missing one of the required fields.
    """

    stage = "decode"


class DetailParseError(ComplianceReportError):
    """One record's embedded compliance detail is not well-formed XML.

    Fatal to the whole batch, not just the offending record.

    Attributes:
        node_id: NodeID of the record whose detail failed to parse.
        node_caption: Caption of that node.
    """

    stage = "flatten"

    def __init__(
        self,
        message: str,
        *,
        node_id: str | None = None,
        node_caption: str | None = None,
    ) -> None:
        self.node_id = node_id
        self.node_caption = node_caption
        if node_caption is not None or node_id is not None:
            message = f"{message} (node={node_caption!r}, node_id={node_id!r})"
        super().__init__(message)
