"""Report formatters for normalized issues."""

import json

from rich.markup import escape

from common.logger import get_logger

from .models import Issue, IssueSeverity, Report

logger = get_logger(__name__)

_ICONS = {
    IssueSeverity.HIGH: "[red]✗[/red]",
    IssueSeverity.NORMAL: "[yellow]⚠[/yellow]",
    IssueSeverity.LOW: "ℹ",
}


class ReportReporter:
    """Format and display the issues of a report."""

    def __init__(self, show_low: bool = True):
        """Initialize the reporter.

        Args:
            show_low: Whether to show low severity issues
        """
        self.show_low = show_low

    def report_console(self, report: Report) -> int:
        """Print issues to the console grouped by file.

        Args:
            report: Report to print

        Returns:
            Exit code (0 for success, 1 if high severity issues were found)
        """
        current_file = None
        for issue in report:
            if not self.show_low and issue.severity == IssueSeverity.LOW:
                continue

            if issue.file_name != current_file:
                current_file = issue.file_name
                logger.info(f"\n{escape(current_file)}:")

            icon = _ICONS.get(issue.severity, "?")
            location = f"{issue.line_start}:{issue.column_start}"
            logger.info(
                f"  {icon} [bold]{location}[/bold] {escape(issue.message)} "
                f"({escape(issue.category)}/{escape(issue.type)})"
            )

        high = report.size_of(IssueSeverity.HIGH)
        normal = report.size_of(IssueSeverity.NORMAL)
        low = report.size_of(IssueSeverity.LOW)
        unmapped = report.size_of(None)

        logger.info("\n" + "=" * 60)
        logger.info(
            f"Total: [bold]{high}[/bold] high, [bold]{normal}[/bold] normal, "
            f"[bold]{low}[/bold] low, [bold]{unmapped}[/bold] without severity"
        )

        if high > 0:
            return 1
        return 0

    def report_json(self, report: Report) -> str:
        """Format issues as JSON, grouped by file in report order.

        Args:
            report: Report to format

        Returns:
            JSON string representation of the report
        """
        grouped: dict[str, list[Issue]] = {}
        for issue in report:
            grouped.setdefault(issue.file_name, []).append(issue)

        data = {
            "files": [
                {
                    "file": file_name,
                    "issues": [
                        {
                            "line": i.line_start,
                            "column": i.column_start,
                            "severity": i.severity.value if i.severity else None,
                            "type": i.type,
                            "category": i.category,
                            "message": i.message,
                        }
                        for i in issues
                    ],
                }
                for file_name, issues in grouped.items()
            ]
        }

        return json.dumps(data, indent=2)
