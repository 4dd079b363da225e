"""Error taxonomy for the eye analysis workflow."""

from typing import Optional


class WorkflowError(Exception):
    """Base class for every error the analysis workflow can surface."""


class ConfigurationError(WorkflowError):
    """Required configuration is missing or invalid. Fatal at startup."""


class ValidationError(WorkflowError):
    """The user asked for something the current state cannot do."""


class TransportError(WorkflowError):
    """The request never produced a usable HTTP response."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ServiceError(WorkflowError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = ""):
        message = f"HTTP error! status: {status_code}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(WorkflowError):
    """A 2xx body that does not match the prediction contract."""


class UnknownDiseaseError(WorkflowError, LookupError):
    """A disease label outside the four recognized conditions."""

    def __init__(self, label):
        super().__init__(f"Unknown disease label: {label!r}")
        self.label = label


class PreviewError(WorkflowError):
    """The selected file could not be decoded into a preview."""
