"""Object model of a Checkstyle XML report.

    <checkstyle version="...">
      <file name="...">
        <error line="..." column="..." severity="..." message="..." source="..."/>
      </file>
    </checkstyle>
"""

from dataclasses import dataclass, field


@dataclass
class Error:
    """An <error> element."""

    line: int = 0
    column: int = 0
    severity: str = ""
    message: str = ""
    source: str = ""  # e.g., "com.puppycrawl.tools.checkstyle.checks.naming.ConstantNameCheck"


@dataclass
class File:
    """A <file> element and its errors in document order."""

    name: str = ""
    errors: list[Error] = field(default_factory=list)

    def add_error(self, error: Error) -> None:
        self.errors.append(error)


@dataclass
class CheckStyle:
    """The <checkstyle> root element and its files in document order."""

    version: str = ""
    files: list[File] = field(default_factory=list)

    def add_file(self, file: File) -> None:
        self.files.append(file)
