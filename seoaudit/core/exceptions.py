"""
Audit failure types.

Every failure is terminal for a single audit call and is reported to the
caller as a report holding only an ``error`` key.
"""

FETCH_FAILED_MESSAGE = "Failed to fetch URL content"


class AuditError(Exception):
    """Base class for failures that replace the whole report."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_report(self) -> dict:
        return {"error": self.message}


class FetchFailure(AuditError):
    """Document could not be fetched (network error, timeout, non-2xx, empty body)."""

    def __init__(self):
        super().__init__(FETCH_FAILED_MESSAGE)


class ExtractionFailure(AuditError):
    """Parsing or metric extraction raised."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
