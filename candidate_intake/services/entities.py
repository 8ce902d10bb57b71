"""
Entity constructors for candidate intake.

Each builder shapes one piece of a submission into one persistable record.
Records know how to save themselves through their repository; they hold no
cross-entity logic.
"""

from typing import Any, Callable, Generic, TypeVar

from candidate_intake.data.models import (
    Candidate,
    CandidateSubmission,
    Education,
    EducationInput,
    Resume,
    ResumeInput,
    WorkExperience,
    WorkExperienceInput,
)
from candidate_intake.data.models.base import BaseDocument
from candidate_intake.data.repositories import (
    BaseRepository,
    get_candidate_repository,
    get_education_repository,
    get_resume_repository,
    get_work_experience_repository,
)

T = TypeVar("T", bound=BaseDocument)


class EntityRecord(Generic[T]):
    """A document paired with the repository that persists it."""

    def __init__(self, model: T, repository: BaseRepository[T]) -> None:
        self._model = model
        self._repository = repository

    @property
    def model(self) -> T:
        return self._model

    def link_candidate(self, candidate_id: Any) -> None:
        """Set the owning candidate before the record is saved."""
        self._model.candidate_id = candidate_id

    async def save(self) -> T:
        """Persist the document. Raises PersistenceError on failure."""
        return await self._repository.create_async(self._model)


# Factory signatures accepted by CandidateService
CandidateFactory = Callable[[CandidateSubmission], EntityRecord[Candidate]]
EducationFactory = Callable[[EducationInput], EntityRecord[Education]]
WorkExperienceFactory = Callable[[WorkExperienceInput], EntityRecord[WorkExperience]]
ResumeFactory = Callable[[ResumeInput], EntityRecord[Resume]]


def build_candidate_record(submission: CandidateSubmission) -> EntityRecord[Candidate]:
    candidate = Candidate(
        name=submission.name,
        email=submission.email,
        phone=submission.phone,
        address=submission.address,
    )
    return EntityRecord(candidate, get_candidate_repository())


def build_education_record(data: EducationInput) -> EntityRecord[Education]:
    return EntityRecord(Education(**data.model_dump()), get_education_repository())


def build_work_experience_record(data: WorkExperienceInput) -> EntityRecord[WorkExperience]:
    return EntityRecord(
        WorkExperience(**data.model_dump()), get_work_experience_repository()
    )


def build_resume_record(data: ResumeInput) -> EntityRecord[Resume]:
    return EntityRecord(Resume(**data.model_dump()), get_resume_repository())
