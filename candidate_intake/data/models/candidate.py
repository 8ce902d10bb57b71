"""
Candidate data models for Candidate Intake.

Defines the persisted candidate document and the education and work
experience documents owned by it. Child records are stored in their own
collections and reference the candidate through ``candidate_id``.
"""

from datetime import date
from typing import ClassVar, Optional

from pydantic import ConfigDict, EmailStr, Field

from candidate_intake.utils.constants import (
    CANDIDATES_COLLECTION,
    EDUCATIONS_COLLECTION,
    WORK_EXPERIENCES_COLLECTION,
)

from .base import BaseDocument, PyObjectId
from .resume import Resume


class Education(BaseDocument):
    """Represents a single education entry."""

    # Additional submission fields are stored as-is
    model_config = ConfigDict(extra="allow")

    candidate_id: Optional[PyObjectId] = None
    degree: str  # e.g., "BSc Computer Science"
    institution: str
    field_of_study: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    class Settings:
        """MongoDB collection settings."""

        name = EDUCATIONS_COLLECTION
        indexes = ["candidate_id"]


class WorkExperience(BaseDocument):
    """Represents a single work experience entry."""

    model_config = ConfigDict(extra="allow")

    candidate_id: Optional[PyObjectId] = None
    company: str
    position: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None  # None indicates current position

    @property
    def is_current(self) -> bool:
        return self.end_date is None

    class Settings:
        """MongoDB collection settings."""

        name = WORK_EXPERIENCES_COLLECTION
        indexes = ["candidate_id"]


class Candidate(BaseDocument):
    """
    Main candidate model representing a job applicant.

    This is the root document stored in the candidates collection. The
    ``education``, ``work_experience`` and ``resumes`` collections start
    empty and are filled as each child record is saved.
    """

    mongo_exclude: ClassVar[set[str]] = {"education", "work_experience", "resumes"}

    # Personal Information
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None

    # Owned records (not part of the stored candidate document)
    education: list[Education] = Field(default_factory=list)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    resumes: list[Resume] = Field(default_factory=list)

    class Settings:
        """MongoDB collection settings."""

        name = CANDIDATES_COLLECTION
        indexes = ["email", "created_at"]
