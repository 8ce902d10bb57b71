"""
Candidate submission validation.

Turns a raw submission into a normalized CandidateSubmission or raises
CandidateValidationError. No I/O.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from candidate_intake.data.models.submission import CandidateSubmission
from candidate_intake.errors import CandidateValidationError
from candidate_intake.utils.config import get_settings


def _format_errors(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid candidate data: " + "; ".join(parts)


def validate_candidate_data(
    submission: Union[Mapping[str, Any], CandidateSubmission],
    max_resume_size_bytes: Optional[int] = None,
) -> CandidateSubmission:
    """
    Validate and normalize a candidate submission.

    Args:
        submission: Raw mapping (snake_case or camelCase keys) or an
            already-built CandidateSubmission, which is re-checked.
        max_resume_size_bytes: CV size limit; defaults to the configured one.

    Returns:
        The normalized submission (trimmed strings, lowercase email).

    Raises:
        CandidateValidationError: if any field is missing or malformed.
    """
    if max_resume_size_bytes is None:
        max_resume_size_bytes = get_settings().intake.max_resume_size_bytes

    data = submission
    if isinstance(submission, CandidateSubmission):
        data = submission.model_dump()

    try:
        return CandidateSubmission.model_validate(
            data, context={"max_resume_size_bytes": max_resume_size_bytes}
        )
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        raise CandidateValidationError(_format_errors(errors), errors) from e
