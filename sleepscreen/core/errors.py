"""Exceptions raised by the screening domain."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

INCOMPLETE_MESSAGE = "Please answer all questions and complete contact information before submitting."


class SurveyError(Exception):
    """Base class for every screening error."""


class FieldValidationError(SurveyError):
    """Raised when a caller requires a contact field to be valid."""

    def __init__(self, error) -> None:
        super().__init__(error.message)
        self.error = error


class InvalidMeasurement(SurveyError, ValueError):
    """A height, weight, neck size or age that cannot feed a calculator."""

    def __init__(self, field: str, value: object, message: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class IncompleteSubmission(SurveyError):
    """Submit was requested before the completion gate allows it."""

    def __init__(
        self,
        missing_questions: Iterable[str] = (),
        missing_contact: Iterable[str] = (),
        message: str = INCOMPLETE_MESSAGE,
    ) -> None:
        self.missing_questions: Sequence[str] = tuple(missing_questions)
        self.missing_contact: Sequence[str] = tuple(missing_contact)
        super().__init__(message)


class SurveyAlreadySubmitted(SurveyError):
    """The session holds a result and only accepts a restart."""

    def __init__(self) -> None:
        super().__init__("Survey already submitted. Restart to begin a new assessment.")


class DerivedAnswerLocked(SurveyError):
    """A calculated answer cannot be overridden while its measurement exists."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"{question} is calculated from a measurement; clear the measurement to answer it directly")


class UnknownRiskFactor(SurveyError, ValueError):
    def __init__(self, factor_id: str) -> None:
        self.factor_id = factor_id
        super().__init__(f"Unknown risk factor: {factor_id}")
