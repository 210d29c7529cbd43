# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data models for the embedded compliance-detail document.

The XML carried in ``XMLResults`` has a closed, three-level shape::

    <root>
      <CB L="interface GigabitEthernet0/1">      ModelConfigBlock
        <Ps>
          <P FM="True" PT="no shutdown">         ModelPattern
            <L FL="no shutdown" FLN="42"/>       ModelFoundLine (optional)
          </P>
        </Ps>
      </CB>
    </root>

Each level gets its own type instead of a generic element tree so the
nesting depth is fixed by construction.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelFoundLine:
    """Where in the device configuration a pattern matched.

    Attributes:
        line_match_text: The matching configuration line (``FL``).
        line_number: Line number in the configuration (``FLN``), as text.
    """

    line_match_text: str
    line_number: str


@dataclass(frozen=True)
class ModelPattern:
    """One rule-pattern check within a config block.

    Attributes:
        found_match_flag: Raw ``FM`` attribute, e.g. ``"True"``/``"False"``.
        pattern_text: Rule pattern description (``PT``).
        found_line: Parsed ``L`` child, or None when the element is absent.
    """

    found_match_flag: str
    pattern_text: str
    found_line: ModelFoundLine | None = None


@dataclass(frozen=True)
class ModelConfigBlock:
    """A matched configuration section and its pattern checks.

    Attributes:
        block_match_label: Raw ``L`` attribute identifying the block.
        patterns: Patterns in document order.
    """

    block_match_label: str
    patterns: tuple[ModelPattern, ...] = ()


@dataclass(frozen=True)
class ModelComplianceDetail:
    """Parsed compliance detail of a single record.

    Attributes:
        config_blocks: Config blocks in document order.
    """

    config_blocks: tuple[ModelConfigBlock, ...] = ()

    @property
    def pattern_count(self) -> int:
        """Total number of patterns across all blocks."""
        return sum(len(block.patterns) for block in self.config_blocks)


__all__ = [
    "ModelComplianceDetail",
    "ModelConfigBlock",
    "ModelFoundLine",
    "ModelPattern",
]
