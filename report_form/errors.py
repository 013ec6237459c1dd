"""Errors raised while talking to the report backends."""


class ReportFormError(Exception):
    """Base class for submission failures."""


class TransportError(ReportFormError):
    """Network failure, timeout or non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnexpectedResponseError(ReportFormError):
    """The backend answered with success but not with the expected payload."""


class ConfigurationError(ReportFormError):
    """A required setting (such as the generation API token) is missing."""
