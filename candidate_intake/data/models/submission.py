"""
Submission schemas for Candidate Intake.

Input shapes for one intake request. Keys are accepted in snake_case or in
the camelCase used by web clients (``workExperiences``, ``fileName``).
"""

from datetime import date
from pathlib import PurePath
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from candidate_intake.utils.constants import (
    MAX_ADDRESS_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_ENTRY_FIELD_LENGTH,
    MAX_NAME_LENGTH,
    MAX_RESUME_SIZE_BYTES,
    PHONE_PATTERN,
    RESERVED_ENTRY_KEYS,
    SUPPORTED_RESUME_FORMATS,
)


class SubmissionModel(BaseModel):
    """Base for submission schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class _DatedEntry(SubmissionModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="before")
    @classmethod
    def reject_reserved_keys(cls, data: Any) -> Any:
        """Ids, owner and timestamps are assigned when the record is stored."""
        if isinstance(data, dict):
            reserved = sorted(RESERVED_ENTRY_KEYS.intersection(data))
            if reserved:
                raise ValueError(f"Reserved field(s) not allowed: {', '.join(reserved)}")
        return data

    @model_validator(mode="after")
    def check_date_order(self) -> "_DatedEntry":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be earlier than start_date")
        return self


class EducationInput(_DatedEntry):
    """One education entry of a submission."""

    model_config = ConfigDict(extra="allow")

    degree: str = Field(..., min_length=1, max_length=MAX_ENTRY_FIELD_LENGTH)
    institution: str = Field(..., min_length=1, max_length=MAX_ENTRY_FIELD_LENGTH)
    field_of_study: Optional[str] = Field(None, max_length=MAX_ENTRY_FIELD_LENGTH)


class WorkExperienceInput(_DatedEntry):
    """One work experience entry of a submission."""

    model_config = ConfigDict(extra="allow")

    company: str = Field(..., min_length=1, max_length=MAX_ENTRY_FIELD_LENGTH)
    position: str = Field(..., min_length=1, max_length=MAX_ENTRY_FIELD_LENGTH)
    description: Optional[str] = Field(None, max_length=MAX_DESCRIPTION_LENGTH)


class ResumeInput(SubmissionModel):
    """The CV attached to a submission."""

    file_name: str = Field(..., min_length=1)
    file_content: str
    file_type: Optional[str] = None

    @field_validator("file_name")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        suffix = PurePath(v).suffix.lower()
        if suffix not in SUPPORTED_RESUME_FORMATS:
            raise ValueError(
                f"Unsupported resume format '{suffix or v}'. "
                f"Supported: {', '.join(SUPPORTED_RESUME_FORMATS)}"
            )
        return v

    @field_validator("file_content")
    @classmethod
    def validate_size(cls, v: str, info: ValidationInfo) -> str:
        """Limit comes from the validation context, defaulting to 10MB."""
        context = info.context or {}
        max_size = context.get("max_resume_size_bytes", MAX_RESUME_SIZE_BYTES)
        if len(v.encode("utf-8")) > max_size:
            raise ValueError(f"File size exceeds maximum of {max_size} bytes")
        return v


class CandidateSubmission(SubmissionModel):
    """Raw input bundle for one intake request."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    address: Optional[str] = Field(None, max_length=MAX_ADDRESS_LENGTH)

    educations: list[EducationInput] = Field(default_factory=list)
    work_experiences: list[WorkExperienceInput] = Field(default_factory=list)
    cv: Optional[ResumeInput] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are unique case-insensitively."""
        return v.lower()
