"""
Business services for Candidate Intake.

This module contains the intake service that orchestrates validation,
entity construction and persistence of candidate submissions.
"""

from candidate_intake.services.candidate_service import (
    CandidateService,
    add_candidate,
    get_candidate_service,
)
from candidate_intake.services.entities import (
    EntityRecord,
    build_candidate_record,
    build_education_record,
    build_resume_record,
    build_work_experience_record,
)
from candidate_intake.services.validator import validate_candidate_data

__all__ = [
    "CandidateService",
    "add_candidate",
    "get_candidate_service",
    "EntityRecord",
    "build_candidate_record",
    "build_education_record",
    "build_resume_record",
    "build_work_experience_record",
    "validate_candidate_data",
]
