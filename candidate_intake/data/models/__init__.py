"""
Pydantic data models and schemas for Candidate Intake.

This module provides the persisted documents and the submission schemas
accepted by the intake service.
"""

# Base models
from .base import BaseDocument, PyObjectId, TimestampMixin

# Resume models
from .resume import Resume, ResumeFormat

# Candidate models
from .candidate import Candidate, Education, WorkExperience

# Submission schemas
from .submission import (
    CandidateSubmission,
    EducationInput,
    ResumeInput,
    WorkExperienceInput,
)

__all__ = [
    # Base
    "BaseDocument",
    "PyObjectId",
    "TimestampMixin",
    # Resume
    "Resume",
    "ResumeFormat",
    # Candidate
    "Candidate",
    "Education",
    "WorkExperience",
    # Submission
    "CandidateSubmission",
    "EducationInput",
    "ResumeInput",
    "WorkExperienceInput",
]
