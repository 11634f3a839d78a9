# bssreport/exceptions.py
"""
Error types for both command-line programs.

Every error is fatal to the run: the entry points catch `ReportError`,
log it and exit non-zero. Nothing here is retried.
"""


class ReportError(Exception):
    """Base class for all errors that abort a run."""


class ConfigError(ReportError):
    """Missing credential, actor or other unusable configuration."""


class FetchError(ReportError):
    """
    Raised when an RPC call fails. Carries the call details so the log line
    says which service and record broke the batch.
    """
    def __init__(
        self,
        message: str,
        *,
        service: str | None = None,
        method: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.service = service
        self.method = method
        self.status_code = status_code
        self.body = body


class NotFoundError(FetchError):
    """A referenced record is absent from an otherwise successful response."""


class ExportError(ReportError):
    """The report file could not be written."""
