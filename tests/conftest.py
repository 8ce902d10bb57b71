"""
Shared test fixtures for the Candidate Intake test suite.

Sets environment variables before any package imports to prevent config
failures, then provides sample submissions and fakes for the storage layer.
"""

import os
import tempfile
from pathlib import Path

# === Set environment BEFORE any candidate_intake imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "candidate_intake_test")
os.environ.setdefault(
    "LOG_FILE_PATH", str(Path(tempfile.gettempdir()) / "candidate_intake_test" / "test.log")
)

import copy
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from candidate_intake.data.database import DatabaseManager


CANDIDATE_DATA: dict[str, Any] = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "educations": [{"degree": "BSc Computer Science", "institution": "University X"}],
    "workExperiences": [{"company": "Company Y", "position": "Developer"}],
    "cv": {"fileName": "resume.pdf", "fileContent": "..."},
}


@pytest.fixture
def candidate_data() -> dict[str, Any]:
    """The reference submission, copied so tests can modify it."""
    return copy.deepcopy(CANDIDATE_DATA)


@pytest.fixture
def make_record():
    """Factory for fake entity records whose save() resolves to ``saved``."""

    def _factory(saved: Any = None, error: Exception | None = None) -> MagicMock:
        record = MagicMock()
        if error is not None:
            record.save = AsyncMock(side_effect=error)
        else:
            record.save = AsyncMock(return_value=saved if saved is not None else {})
        return record

    return _factory


@pytest.fixture
def saved_candidate():
    """What a successful candidate save returns."""
    return SimpleNamespace(
        id="123",
        email="john.doe@example.com",
        education=[],
        work_experience=[],
        resumes=[],
    )


@pytest.fixture
def fake_collections(monkeypatch):
    """
    Replace MongoDB collections with in-memory mocks.

    Returns a dict of collection name -> mock; each insert_one records the
    document and returns a fresh ObjectId.
    """
    collections: dict[str, MagicMock] = {}

    def _get_collection(self, name: str) -> MagicMock:
        if name not in collections:
            collection = MagicMock()
            collection.inserted = []

            async def insert_one(document, _collection=collection):
                _collection.inserted.append(document)
                return SimpleNamespace(inserted_id=ObjectId())

            collection.insert_one = AsyncMock(side_effect=insert_one)
            collections[name] = collection
        return collections[name]

    monkeypatch.setattr(DatabaseManager, "get_async_collection", _get_collection)
    return collections
