"""
Application-wide constants for Candidate Intake.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "candidate-intake"
APP_DISPLAY_NAME: Final[str] = "Candidate Intake Service"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================

SUPPORTED_RESUME_FORMATS: Final[tuple[str, ...]] = (
    ".pdf",
    ".docx",
    ".doc",
    ".txt",
    ".rtf",
)

MAX_RESUME_SIZE_BYTES: Final[int] = 10 * 1024 * 1024  # 10MB


# =============================================================================
# Storage
# =============================================================================

CANDIDATES_COLLECTION: Final[str] = "candidates"
EDUCATIONS_COLLECTION: Final[str] = "educations"
WORK_EXPERIENCES_COLLECTION: Final[str] = "work_experiences"
RESUMES_COLLECTION: Final[str] = "resumes"


# =============================================================================
# Validation Limits
# =============================================================================

MAX_NAME_LENGTH: Final[int] = 100
MAX_ADDRESS_LENGTH: Final[int] = 100
MAX_ENTRY_FIELD_LENGTH: Final[int] = 100  # degree, institution, company, position
MAX_DESCRIPTION_LENGTH: Final[int] = 200
PHONE_PATTERN: Final[str] = r"^\+?[0-9 ()\-]{6,20}$"

# Document fields an education or work entry may not set itself
RESERVED_ENTRY_KEYS: Final[frozenset[str]] = frozenset(
    {"id", "_id", "candidate_id", "candidateId", "created_at", "createdAt", "updated_at", "updatedAt"}
)


# =============================================================================
# Messages
# =============================================================================

DUPLICATE_EMAIL_MESSAGE: Final[str] = "The email already exists in the database"


# =============================================================================
# Enums
# =============================================================================


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATE_ADDED = "candidate_added"
    CANDIDATE_REJECTED = "candidate_rejected"
