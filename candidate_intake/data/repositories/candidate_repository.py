"""
Candidate repository for Candidate Intake.

Provides data access for candidate documents. The candidates collection
carries a unique index on ``email``; inserting a second candidate with the
same email fails with a UNIQUE_VIOLATION PersistenceError.
"""

from typing import Optional

from candidate_intake.data.models.candidate import Candidate
from candidate_intake.utils.constants import CANDIDATES_COLLECTION

from .base import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for candidate document operations."""

    @property
    def collection_name(self) -> str:
        return CANDIDATES_COLLECTION


# Singleton instance
_candidate_repository: Optional[CandidateRepository] = None


def get_candidate_repository() -> CandidateRepository:
    """Get the candidate repository singleton instance."""
    global _candidate_repository
    if _candidate_repository is None:
        _candidate_repository = CandidateRepository()
    return _candidate_repository
