"""Data models for normalized issues and the report that collects them."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class IssueSeverity(Enum):
    """Ranked severity levels of a normalized issue."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


@dataclass(frozen=True)
class Issue:
    """A single normalized issue."""

    file_name: str
    line_start: int
    column_start: int
    severity: IssueSeverity | None  # None when the tool's severity is unknown
    message: str
    type: str  # e.g., "NamingCheck"
    category: str  # e.g., "Naming"


class IssueBuilder:
    """Collects issue attributes and creates immutable Issue instances."""

    def __init__(self):
        self._file_name = ""
        self._line_start = 0
        self._column_start = 0
        self._severity: IssueSeverity | None = None
        self._message = ""
        self._type = ""
        self._category = ""

    def set_file_name(self, file_name: str) -> "IssueBuilder":
        self._file_name = file_name
        return self

    def set_line_start(self, line_start: int) -> "IssueBuilder":
        self._line_start = line_start
        return self

    def set_column_start(self, column_start: int) -> "IssueBuilder":
        self._column_start = column_start
        return self

    def set_severity(self, severity: IssueSeverity | None) -> "IssueBuilder":
        self._severity = severity
        return self

    def set_message(self, message: str) -> "IssueBuilder":
        self._message = message
        return self

    def set_type(self, type_: str) -> "IssueBuilder":
        self._type = type_
        return self

    def set_category(self, category: str) -> "IssueBuilder":
        self._category = category
        return self

    def build(self) -> Issue:
        """Create an issue from the attributes set so far."""
        return Issue(
            file_name=self._file_name,
            line_start=self._line_start,
            column_start=self._column_start,
            severity=self._severity,
            message=self._message,
            type=self._type,
            category=self._category,
        )


class Report:
    """Ordered, append-only collection of issues."""

    def __init__(self):
        self._issues: list[Issue] = []

    def add(self, issue: Issue) -> "Report":
        """Append an issue to the end of the report."""
        self._issues.append(issue)
        return self

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __getitem__(self, index: int) -> Issue:
        return self._issues[index]

    @property
    def is_empty(self) -> bool:
        """Check if the report contains no issues."""
        return len(self._issues) == 0

    @property
    def files(self) -> list[str]:
        """Distinct file names, in the order they first appear."""
        return list(dict.fromkeys(i.file_name for i in self._issues))

    def size_of(self, severity: IssueSeverity | None) -> int:
        """Count the issues with the given severity (None counts unmapped issues)."""
        return sum(1 for i in self._issues if i.severity is severity)

    def __repr__(self) -> str:
        return f"Report(issues={len(self._issues)})"
