"""Service errors raised by the model tenancy form and mapped to responses in main."""
from __future__ import annotations


class ModelTenancyServiceError(Exception):
    """Unexpected failure inside the service, surfaced as a 500."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TemplateLoadError(RuntimeError):
    """The blank JSON template could not be read or parsed."""


class InvalidSubmissionError(ValueError):
    """Submitted form data is not valid JSON or does not match the form shape."""


class UnsupportedDocumentTypeError(ValueError):
    pass


class ValidationFailedError(Exception):
    """The submitted tenancy failed validation. issues: [{"field", "message"}]."""

    def __init__(self, issues: list[dict[str, str]]):
        super().__init__("Validation failed")
        self.issues = issues
