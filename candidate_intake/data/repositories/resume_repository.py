"""
Resume repository for Candidate Intake.

Stores the CV metadata and content submitted with a candidate.
"""

from typing import Optional

from candidate_intake.data.models.resume import Resume
from candidate_intake.utils.constants import RESUMES_COLLECTION

from .base import BaseRepository


class ResumeRepository(BaseRepository[Resume]):
    """Repository for resume document operations."""

    @property
    def collection_name(self) -> str:
        return RESUMES_COLLECTION


# Singleton instance
_resume_repository: Optional[ResumeRepository] = None


def get_resume_repository() -> ResumeRepository:
    """Get the resume repository singleton instance."""
    global _resume_repository
    if _resume_repository is None:
        _resume_repository = ResumeRepository()
    return _resume_repository
