"""
Error types for Candidate Intake.

Validation failures, storage failures classified at the repository
boundary, and the duplicate-email error reported to callers.
"""

from enum import Enum
from typing import Any, Optional

from candidate_intake.utils.constants import DUPLICATE_EMAIL_MESSAGE


class IntakeError(Exception):
    """Base class for all intake errors."""


class CandidateValidationError(IntakeError):
    """A submission failed validation. Raised before anything is stored."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class PersistenceErrorKind(str, Enum):
    """Classification of a failed storage write."""

    UNIQUE_VIOLATION = "unique_violation"
    UNAVAILABLE = "unavailable"
    OTHER = "other"


class PersistenceError(IntakeError):
    """
    A storage write failed.

    The message is the underlying driver message, unchanged. ``fields``
    names the index keys involved in a unique violation when known.
    """

    def __init__(
        self,
        message: str,
        kind: PersistenceErrorKind = PersistenceErrorKind.OTHER,
        fields: Optional[list[str]] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.fields = fields or []

    @property
    def is_conflict(self) -> bool:
        return self.kind == PersistenceErrorKind.UNIQUE_VIOLATION


class DuplicateEmailError(IntakeError):
    """A candidate with the submitted email already exists."""

    def __init__(self, email: Optional[str] = None) -> None:
        super().__init__(DUPLICATE_EMAIL_MESSAGE)
        self.email = email
