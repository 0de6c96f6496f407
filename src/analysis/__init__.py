"""Read static-analysis reports into normalized issues."""

from .errors import AnalysisError, ParsingError
from .models import Issue, IssueBuilder, IssueSeverity, Report

__all__ = [
    "AnalysisError",
    "Issue",
    "IssueBuilder",
    "IssueSeverity",
    "ParsingError",
    "Report",
]
