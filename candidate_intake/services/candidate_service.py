"""
Candidate intake service.

Coordinates one intake request: validation, candidate persistence, child
record persistence and error translation.

Saves are awaited one at a time. The candidate is stored first so its id
exists before any child references it; then education entries, work
experience entries and finally the CV, each in submission order. There is
no transaction: if a child save fails the candidate document and any
children saved before it stay in storage, and the failure is raised.
"""

from typing import Any, Callable, Mapping, Optional, Union

from candidate_intake.data.models import Candidate, CandidateSubmission
from candidate_intake.errors import DuplicateEmailError, PersistenceError
from candidate_intake.services.entities import (
    CandidateFactory,
    EducationFactory,
    ResumeFactory,
    WorkExperienceFactory,
    build_candidate_record,
    build_education_record,
    build_resume_record,
    build_work_experience_record,
)
from candidate_intake.services.validator import validate_candidate_data
from candidate_intake.utils.constants import AuditAction
from candidate_intake.utils.logger import LoggerMixin, audit_log

Validator = Callable[[Any], CandidateSubmission]


class CandidateService(LoggerMixin):
    """
    Adds candidates with their education, work experience and CV.

    The validator and the entity factories are injectable so tests can
    substitute fakes for the storage layer.
    """

    def __init__(
        self,
        validator: Validator = validate_candidate_data,
        candidate_factory: CandidateFactory = build_candidate_record,
        education_factory: EducationFactory = build_education_record,
        work_experience_factory: WorkExperienceFactory = build_work_experience_record,
        resume_factory: ResumeFactory = build_resume_record,
    ) -> None:
        self._validate = validator
        self._candidate_factory = candidate_factory
        self._education_factory = education_factory
        self._work_experience_factory = work_experience_factory
        self._resume_factory = resume_factory

    async def add_candidate(
        self, submission: Union[Mapping[str, Any], CandidateSubmission]
    ) -> Candidate:
        """
        Validate and store a candidate submission.

        Returns:
            The stored candidate with ``education``, ``work_experience`` and
            ``resumes`` filled with the saved child records.

        Raises:
            CandidateValidationError: invalid submission, nothing stored.
            DuplicateEmailError: a candidate with this email already exists.
            PersistenceError: any other storage failure, unchanged.
        """
        data = self._validate(submission)

        record = self._candidate_factory(data)
        try:
            candidate = await record.save()
        except PersistenceError as e:
            if e.is_conflict:
                self.logger.info(f"Rejected submission for existing email {data.email}")
                audit_log(
                    AuditAction.CANDIDATE_REJECTED.value,
                    {"email": data.email, "reason": "duplicate_email"},
                    audit_type="REJECTION",
                )
                raise DuplicateEmailError(data.email) from e
            raise

        self.logger.info(f"Stored candidate {candidate.id}")

        try:
            for entry in data.educations:
                saved = await self._save_child(self._education_factory(entry), candidate.id)
                candidate.education.append(saved)

            for entry in data.work_experiences:
                saved = await self._save_child(
                    self._work_experience_factory(entry), candidate.id
                )
                candidate.work_experience.append(saved)

            if data.cv is not None:
                saved = await self._save_child(self._resume_factory(data.cv), candidate.id)
                candidate.resumes.append(saved)
        except Exception as e:
            self.logger.warning(
                f"Intake of candidate {candidate.id} stopped after a failed child save, "
                f"candidate record remains stored: {e}"
            )
            raise

        audit_log(
            AuditAction.CANDIDATE_ADDED.value,
            {
                "candidate_id": str(candidate.id),
                "educations": len(candidate.education),
                "work_experiences": len(candidate.work_experience),
                "resumes": len(candidate.resumes),
            },
        )
        return candidate

    @staticmethod
    async def _save_child(record: Any, candidate_id: Any) -> Any:
        record.link_candidate(candidate_id)
        return await record.save()


# Singleton instance
_candidate_service: Optional[CandidateService] = None


def get_candidate_service() -> CandidateService:
    """Get the candidate service singleton instance."""
    global _candidate_service
    if _candidate_service is None:
        _candidate_service = CandidateService()
    return _candidate_service


async def add_candidate(
    submission: Union[Mapping[str, Any], CandidateSubmission],
) -> Candidate:
    """Add a candidate using the shared service."""
    return await get_candidate_service().add_candidate(submission)
