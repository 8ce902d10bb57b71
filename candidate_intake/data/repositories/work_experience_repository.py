"""
Work experience repository for Candidate Intake.
"""

from typing import Optional

from candidate_intake.data.models.candidate import WorkExperience
from candidate_intake.utils.constants import WORK_EXPERIENCES_COLLECTION

from .base import BaseRepository


class WorkExperienceRepository(BaseRepository[WorkExperience]):
    """Repository for work experience document operations."""

    @property
    def collection_name(self) -> str:
        return WORK_EXPERIENCES_COLLECTION


# Singleton instance
_work_experience_repository: Optional[WorkExperienceRepository] = None


def get_work_experience_repository() -> WorkExperienceRepository:
    """Get the work experience repository singleton instance."""
    global _work_experience_repository
    if _work_experience_repository is None:
        _work_experience_repository = WorkExperienceRepository()
    return _work_experience_repository
