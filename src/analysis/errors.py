"""Exceptions raised while reading static-analysis reports."""


class AnalysisError(Exception):
    """Base exception for report analysis errors."""

    pass


class ParsingError(AnalysisError):
    """The input could not be decoded into a report.

    Raised for malformed XML, I/O failures while reading the input and
    documents that are not of the expected report format. The underlying
    cause, when there is one, is chained as ``__cause__``.
    """

    pass
