# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Compliance Report CLI for SolarWinds NCM policy results.

Reads a SWIS compliance envelope (a saved query export or a raw query
response), flattens every rule pattern into one row and writes a
timestamped CSV report.

Defaults come from NCM_REPORT_* environment variables (see
ncmcompliance.settings); flags override them.

Usage:
    python -m ncmcompliance --file results.json
    python -m ncmcompliance --file results.json --rule "ICE Interface Policy"
    python -m ncmcompliance --file results.json --output-dir reports/
    python -m ncmcompliance --file results.json --variant minimal
    python -m ncmcompliance --json < results.json

Exit Codes:
    0 - Success: report produced
    1 - Invalid input: the envelope or a record's detail could not be parsed
    2 - Error: CLI usage error, invalid NCM_REPORT_* value, or the
        input/report file could not be accessed
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ncmcompliance import __version__
from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant
from ncmcompliance.errors import ComplianceReportError
from ncmcompliance.models.model_report_result import ModelReportResult
from ncmcompliance.pipeline import run_report
from ncmcompliance.settings import ComplianceReportSettings

logger = logging.getLogger(__name__)

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _format_error(error: BaseException) -> str:
    """Prefix the error with its stage notes, outermost first."""
    notes: list[str] = list(getattr(error, "__notes__", []))
    return ": ".join([*reversed(notes), str(error)])


def _format_json_output(result: ModelReportResult) -> str:
    """Format violations as a JSON array keyed by report column name."""
    return json.dumps(
        [v.to_dict(result.variant) for v in result.violations],
        indent=JSON_INDENT_SPACES,
    )


def _read_input(input_file: Path | None) -> bytes:
    if input_file is None:
        return sys.stdin.buffer.read()
    return input_file.read_bytes()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flatten NCM compliance results into a CSV violation report",
        prog="python -m ncmcompliance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -f results.json                     # CSV report in the current directory
  %(prog)s -f results.json -r "Rule-X"         # Only records for one rule
  %(prog)s -f results.json -o reports/         # CSV report in reports/
  %(prog)s -f results.json --variant minimal   # Node/interface report
  %(prog)s --json < results.json               # JSON rows on stdout, no CSV
""",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        default=None,
        metavar="PATH",
        help="Input JSON envelope (default: NCM_REPORT_INPUT_FILE, else stdin)",
    )

    parser.add_argument(
        "--rule",
        "-r",
        default=None,
        metavar="NAME",
        help="Name of rule to target (default: all rules)",
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory for the CSV report (default: NCM_REPORT_OUTPUT_DIR or .)",
    )

    parser.add_argument(
        "--variant",
        choices=[v.value for v in EnumSchemaVariant],
        default=None,
        help="Report schema variant (default: full)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print violations as JSON to stdout instead of writing a CSV",
    )

    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Print version and exit",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entry point for the compliance report.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code following Unix conventions:
            0 - Success: report produced
            1 - Invalid input: envelope or detail could not be parsed
            2 - Error: CLI usage error, invalid environment or file access failure
    """
    parser = _build_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.version:
        print(f"version {__version__}", file=sys.stderr)
        return 0

    try:
        settings = ComplianceReportSettings()
    except ValidationError as e:
        print(f"Error: invalid NCM_REPORT_* environment: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.resolved_log_level(), format=LOG_FORMAT)

    input_file = parsed_args.file or settings.input_file
    output_dir = parsed_args.output_dir or settings.output_dir
    rule_name = parsed_args.rule or settings.rule_name
    variant = (
        EnumSchemaVariant(parsed_args.variant)
        if parsed_args.variant
        else settings.schema_variant
    )

    try:
        content = _read_input(input_file)
        result = run_report(
            content,
            variant=variant,
            output_dir=None if parsed_args.json else output_dir,
            rule_name=rule_name,
        )
    except ComplianceReportError as e:
        logger.debug("Report failed at stage %s", e.stage, exc_info=True)
        print(f"Error: {_format_error(e)}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {_format_error(e)}", file=sys.stderr)
        return 2

    if parsed_args.json:
        print(_format_json_output(result))
        print(f"found {result.violation_count} violations", file=sys.stderr)
    else:
        print(f"found {result.violation_count} violations")
        if result.output_path is not None:
            print(f"report written to {result.output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
