"""
Resume data models for Candidate Intake.

Defines the schema for the CV attached to a candidate submission. Only the
file name, type and content are kept; file storage is handled elsewhere.
"""

from datetime import datetime
from enum import Enum
from pathlib import PurePath
from typing import Optional

from pydantic import Field, model_validator

from candidate_intake.utils.constants import RESUMES_COLLECTION

from .base import BaseDocument, PyObjectId


class ResumeFormat(str, Enum):
    """Supported resume file formats."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    TXT = "txt"
    RTF = "rtf"

    @classmethod
    def from_filename(cls, filename: str) -> Optional["ResumeFormat"]:
        """Guess the format from a file extension."""
        suffix = PurePath(filename).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            return None


class Resume(BaseDocument):
    """
    Resume document attached to a candidate.

    ``file_content`` holds the text or base64 payload exactly as submitted.
    """

    candidate_id: Optional[PyObjectId] = None

    file_name: str
    file_content: str
    file_type: Optional[str] = None  # format name, e.g. "pdf"
    file_size_bytes: int = 0
    uploaded_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def fill_file_metadata(self) -> "Resume":
        """Derive type and size when the submission omits them."""
        if self.file_type is None:
            detected = ResumeFormat.from_filename(self.file_name)
            self.file_type = detected.value if detected else None
        if not self.file_size_bytes:
            self.file_size_bytes = len(self.file_content.encode("utf-8"))
        return self

    class Settings:
        """MongoDB collection settings."""

        name = RESUMES_COLLECTION
        indexes = ["candidate_id", "created_at"]
