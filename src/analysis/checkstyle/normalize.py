"""Normalization of Checkstyle error attributes.

Plain functions over strings, independent of the document traversal.
"""

from ..models import IssueSeverity

SEVERITIES: dict[str, IssueSeverity] = {
    "error": IssueSeverity.HIGH,
    "warning": IssueSeverity.NORMAL,
    "info": IssueSeverity.LOW,
}

# Files Checkstyle reports for package documentation, not source code
IGNORED_FILE_SUFFIX = "package.html"


def map_severity(severity: str) -> IssueSeverity | None:
    """Map a Checkstyle severity token (case-insensitive) to an issue severity.

    Returns None for tokens other than error, warning and info.
    """
    return SEVERITIES.get(severity.lower())


def get_type(source: str) -> str:
    """Return the unqualified check name of a source identifier.

    Example:
        >>> get_type("com.puppycrawl.tools.checkstyle.checks.naming.ConstantNameCheck")
        'ConstantNameCheck'
    """
    return source.rpartition(".")[2]


def get_category(source: str) -> str:
    """Return the capitalized second-to-last segment of a source identifier.

    Only the first character is title-cased, and only when it maps to a
    single character; the rest is kept as is.

    Example:
        >>> get_category("com.puppycrawl.tools.checkstyle.checks.naming.ConstantNameCheck")
        'Naming'
        >>> get_category("ConstantNameCheck")
        ''
    """
    category = get_type(source.rpartition(".")[0])
    first = category[:1].title()
    if len(first) != 1:
        first = category[:1]
    return first + category[1:]


def is_valid_file(file_name: str) -> bool:
    """Check if the errors of a file should be reported."""
    return not file_name.endswith(IGNORED_FILE_SUFFIX)
