"""Tests for the Checkstyle report parser."""

import io

import pytest

from analysis.checkstyle import CheckStyleParser
from analysis.errors import ParsingError
from analysis.models import Issue, IssueSeverity

SAMPLE_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="10.12.4">
  <file name="src/main/java/com/example/App.java">
    <error line="12" column="4" severity="error" message="Line is longer than 120 characters."
           source="com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"/>
    <error line="30" severity="WARNING" message="Name 'foo_bar' must match pattern."
           source="com.puppycrawl.tools.checkstyle.checks.naming.MemberNameCheck"/>
    <error line="41" column="9" severity="ignore" message="Unused import."
           source="com.puppycrawl.tools.checkstyle.checks.imports.UnusedImportsCheck"/>
  </file>
  <file name="src/main/java/com/example/package.html">
    <error line="1" severity="error" message="Missing package documentation."
           source="com.puppycrawl.tools.checkstyle.checks.javadoc.JavadocPackageCheck"/>
    <error line="2" severity="error" message="Another one."
           source="com.puppycrawl.tools.checkstyle.checks.javadoc.JavadocPackageCheck"/>
  </file>
  <file name="src/main/java/com/example/Util.java">
    <error line="7" column="1" severity="info" message="Missing a Javadoc comment."
           source="com.puppycrawl.tools.checkstyle.checks.javadoc.MissingJavadocMethodCheck"/>
  </file>
</checkstyle>
"""


def parse(xml: str):
    return CheckStyleParser().parse(io.StringIO(xml))


def test_single_error_end_to_end():
    """Test that one error becomes exactly one normalized issue."""
    report = parse(
        '<checkstyle><file name="A.java">'
        '<error line="5" column="2" severity="warning" message="bad name" source="x.y.Naming"/>'
        "</file></checkstyle>"
    )

    assert list(report) == [
        Issue(
            file_name="A.java",
            line_start=5,
            column_start=2,
            severity=IssueSeverity.NORMAL,
            message="bad name",
            type="Naming",
            category="Y",
        )
    ]


def test_sample_report():
    """Test a realistic report with a filtered package.html entry."""
    report = parse(SAMPLE_REPORT)

    assert len(report) == 4
    assert report.files == [
        "src/main/java/com/example/App.java",
        "src/main/java/com/example/Util.java",
    ]

    first = report[0]
    assert first.severity is IssueSeverity.HIGH
    assert first.type == "LineLengthCheck"
    assert first.category == "Sizes"
    assert (first.line_start, first.column_start) == (12, 4)

    second = report[1]
    assert second.severity is IssueSeverity.NORMAL
    assert second.category == "Naming"
    assert second.column_start == 0

    assert report[3].severity is IssueSeverity.LOW
    assert report[3].category == "Javadoc"


def test_unmapped_severity_keeps_issue():
    """Test that an unknown severity produces an issue without severity."""
    report = parse(SAMPLE_REPORT)

    unmapped = report[2]
    assert unmapped.severity is None
    assert unmapped.message == "Unused import."
    assert unmapped.type == "UnusedImportsCheck"
    assert unmapped.category == "Imports"


def test_package_html_contributes_no_issues():
    """Test that package.html files are skipped regardless of their errors."""
    report = parse(SAMPLE_REPORT)
    assert all(not i.file_name.endswith("package.html") for i in report)


def test_suffix_mismatch_is_not_filtered():
    """Test that only the literal package.html suffix is filtered."""
    report = parse(
        '<checkstyle><file name="pkg/package.html.java">'
        '<error line="1" severity="error" message="m" source="a.b.C"/>'
        "</file></checkstyle>"
    )
    assert len(report) == 1
    assert report[0].file_name == "pkg/package.html.java"


def test_parsing_is_idempotent():
    """Test that parsing the same input twice yields identical issues."""
    assert list(parse(SAMPLE_REPORT)) == list(parse(SAMPLE_REPORT))


def test_empty_report():
    """Test that a report without files has no issues."""
    report = parse('<checkstyle version="10.0"></checkstyle>')
    assert report.is_empty


def test_missing_root_is_rejected():
    """Test that a document without <checkstyle> root is rejected."""
    with pytest.raises(ParsingError, match="not a Checkstyle file"):
        parse("<foo/>")


def test_malformed_xml_is_rejected():
    """Test that a truncated document fails with the same error kind."""
    with pytest.raises(ParsingError) as excinfo:
        parse('<checkstyle><file name="A.java">')

    assert "not a Checkstyle file" not in str(excinfo.value)
    assert excinfo.value.__cause__ is not None


def test_parse_file(tmp_path):
    """Test parsing a report from disk."""
    report_file = tmp_path / "checkstyle-result.xml"
    report_file.write_text(SAMPLE_REPORT, encoding="utf-8")

    report = CheckStyleParser().parse_file(report_file)

    assert len(report) == 4


def test_parse_missing_file(tmp_path):
    """Test that a missing file is reported as a parsing error."""
    with pytest.raises(ParsingError) as excinfo:
        CheckStyleParser().parse_file(tmp_path / "missing.xml")

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_namespaced_report():
    """Test that a namespaced report is accepted and converted."""
    report = parse(
        '<cs:checkstyle xmlns:cs="urn:checkstyle"><cs:file name="A.java">'
        '<cs:error line="1" severity="info" message="m" source="a.b.C"/>'
        "</cs:file></cs:checkstyle>"
    )

    assert len(report) == 1
    assert report[0].severity is IssueSeverity.LOW
    assert report[0].category == "B"
