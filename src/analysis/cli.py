#!/usr/bin/env python3
"""CLI interface for reading Checkstyle reports."""

import argparse
from pathlib import Path

from common.env import env
from common.logger import error, success

from .checkstyle import CheckStyleParser
from .errors import ParsingError
from .reporters import ReportReporter


def cmd_parse(args):
    """Parse a Checkstyle report and print its issues.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors or high severity issues)
    """
    report_path = Path(args.report)

    if not report_path.is_file():
        error(f"Error: File '{report_path}' does not exist")
        return 1

    try:
        report = CheckStyleParser().parse_file(report_path)
    except ParsingError as e:
        error(f"Error: {e}")
        return 1

    reporter = ReportReporter(show_low=args.show_low)

    if args.format == "json":
        output = reporter.report_json(report)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(output, encoding="utf-8")
            success(f"{len(report)} issues written to {output_path}")
        else:
            print(output)
        return 0

    return reporter.report_console(report)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Read Checkstyle XML reports")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse a Checkstyle XML report")
    parse_parser.add_argument("report", type=str, help="Path to the checkstyle-result.xml file")
    parse_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default=env.report_format(),
        help="Output format (default: CHECKSTYLE_REPORT_FORMAT or console)",
    )
    parse_parser.add_argument(
        "--output",
        type=str,
        help="Write JSON output to this file instead of stdout",
    )
    parse_parser.add_argument(
        "--hide-low",
        dest="show_low",
        action="store_false",
        default=env.show_low_severity(),
        help="Hide low severity issues in console output",
    )
    parse_parser.set_defaults(func=cmd_parse)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    exit(main())
