"""Parser for Checkstyle XML reports."""

from pathlib import Path
from typing import IO

from common.logger import get_logger

from ..errors import ParsingError
from ..models import IssueBuilder, Report
from .decoder import Binding, Rule, XmlDecoder
from .model import CheckStyle, Error, File
from .normalize import get_category, get_type, is_valid_file, map_severity

logger = get_logger(__name__)

CHECKSTYLE_RULES: list[Rule] = [
    Rule(
        path="checkstyle",
        model=CheckStyle,
        bindings={"version": Binding("version")},
    ),
    Rule(
        path="checkstyle/file",
        model=File,
        bindings={"name": Binding("name")},
        attach="add_file",
    ),
    Rule(
        path="checkstyle/file/error",
        model=Error,
        bindings={
            "line": Binding("line", int),
            "column": Binding("column", int),
            "severity": Binding("severity"),
            "message": Binding("message"),
            "source": Binding("source"),
        },
        attach="add_error",
    ),
]


class CheckStyleParser:
    """Reads Checkstyle XML reports into normalized issues."""

    def parse(self, stream: IO[str] | IO[bytes]) -> Report:
        """Parse a Checkstyle report.

        Args:
            stream: Readable text or binary stream with the XML report

        Returns:
            Report with one issue per reported error, in document order

        Raises:
            ParsingError: If the input is not well-formed XML, cannot be
                read, or has no <checkstyle> root element
        """
        checkstyle = XmlDecoder(CHECKSTYLE_RULES).decode(stream)
        if checkstyle is None:
            raise ParsingError("Input stream is not a Checkstyle file.")

        return self.convert(checkstyle)

    def parse_file(self, path: Path) -> Report:
        """Parse a Checkstyle report file.

        The file is read as bytes so the encoding declared by the XML
        document is honoured.
        """
        try:
            with open(path, "rb") as stream:
                return self.parse(stream)
        except OSError as e:
            raise ParsingError(f"Failed to open '{path}': {e}") from e

    def convert(self, checkstyle: CheckStyle) -> Report:
        """Convert the decoded document into a report of issues."""
        report = Report()
        skipped = 0

        for file in checkstyle.files:
            if not is_valid_file(file.name):
                skipped += 1
                continue

            for error in file.errors:
                builder = IssueBuilder()
                builder.set_severity(map_severity(error.severity))
                builder.set_type(get_type(error.source))
                builder.set_category(get_category(error.source))
                builder.set_message(error.message)
                builder.set_line_start(error.line)
                builder.set_file_name(file.name)
                builder.set_column_start(error.column)
                report.add(builder.build())

        logger.debug(
            f"Converted {len(report)} issues from {len(checkstyle.files)} files "
            f"({skipped} skipped)"
        )
        return report
