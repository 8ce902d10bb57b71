"""
Database repositories for Candidate Intake data access.

This module provides repository classes for all database collections,
implementing the repository pattern for clean data access.
"""

# Base repository
from .base import BaseRepository, classify_storage_error

# Entity repositories
from .candidate_repository import CandidateRepository, get_candidate_repository
from .education_repository import EducationRepository, get_education_repository
from .work_experience_repository import (
    WorkExperienceRepository,
    get_work_experience_repository,
)
from .resume_repository import ResumeRepository, get_resume_repository

__all__ = [
    # Base
    "BaseRepository",
    "classify_storage_error",
    # Candidate
    "CandidateRepository",
    "get_candidate_repository",
    # Education
    "EducationRepository",
    "get_education_repository",
    # Work experience
    "WorkExperienceRepository",
    "get_work_experience_repository",
    # Resume
    "ResumeRepository",
    "get_resume_repository",
]
