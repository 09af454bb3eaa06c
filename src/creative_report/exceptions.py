# src/creative_report/exceptions.py

__all__ = [
    "ReportError",
    "ConfigError",
    "MonthFormatError",
    "FetchError",
    "ResponseDecodeError",
]


class ReportError(Exception):
    """Base exception for failures that abort report generation."""

    pass


class ConfigError(ReportError):
    """Raised when a required environment value is missing or invalid."""

    pass


class MonthFormatError(ReportError, ValueError):
    """Raised when the month argument is not a valid YYYY-MM value."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date format, use YYYY-MM (got {value!r})")


class FetchError(ReportError):
    """Raised when the code-review request fails at transport or HTTP level."""

    pass


class ResponseDecodeError(ReportError):
    """Raised when the code-review response cannot be decoded into reviews.

    The raw body is kept on the exception so callers can log it.
    """

    def __init__(self, message: str, body: str | None = None):
        self.body = body
        super().__init__(message)
