"""Exception hierarchy for zapcheck."""


class ZapCheckError(Exception):
    """Base class for all zapcheck errors."""


class MalformedInputError(ZapCheckError):
    """Input is not well-formed or misses a required element or value."""


class MalformedReportError(MalformedInputError):
    """The ZAP report could not be turned into a Report.

    The underlying parser or conversion error is chained and also kept on
    ``cause``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ClassificationError(ZapCheckError, ValueError):
    """Risk code outside the known range, raised only in strict mode."""

    def __init__(self, risk_code: int):
        super().__init__(f"Unknown risk code: {risk_code}")
        self.risk_code = risk_code


class ResourceUnavailableError(ZapCheckError):
    """The report exists but cannot be opened."""


class ReportProcessingError(ZapCheckError):
    """A run failed; the message tells the user how to fix the setup."""
