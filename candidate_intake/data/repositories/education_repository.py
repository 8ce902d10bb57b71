"""
Education repository for Candidate Intake.

Stores education entries in their own collection, keyed by candidate_id.
"""

from typing import Optional

from candidate_intake.data.models.candidate import Education
from candidate_intake.utils.constants import EDUCATIONS_COLLECTION

from .base import BaseRepository


class EducationRepository(BaseRepository[Education]):
    """Repository for education document operations."""

    @property
    def collection_name(self) -> str:
        return EDUCATIONS_COLLECTION


# Singleton instance
_education_repository: Optional[EducationRepository] = None


def get_education_repository() -> EducationRepository:
    """Get the education repository singleton instance."""
    global _education_repository
    if _education_repository is None:
        _education_repository = EducationRepository()
    return _education_repository
