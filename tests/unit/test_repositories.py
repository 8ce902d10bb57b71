"""
Tests for repositories in candidate_intake.data.repositories.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import (
    AutoReconnect,
    DuplicateKeyError,
    OperationFailure,
    ServerSelectionTimeoutError,
    WriteError,
)

from candidate_intake.data.models import Candidate, Education
from candidate_intake.data.repositories import (
    CandidateRepository,
    EducationRepository,
    ResumeRepository,
    WorkExperienceRepository,
    classify_storage_error,
    get_candidate_repository,
)
from candidate_intake.errors import PersistenceError, PersistenceErrorKind


class TestClassifyStorageError:
    def test_duplicate_key_is_unique_violation(self):
        error = DuplicateKeyError(
            "E11000 duplicate key error collection: candidates index: email_1",
            11000,
            {"keyPattern": {"email": 1}, "keyValue": {"email": "john.doe@example.com"}},
        )
        result = classify_storage_error(error)

        assert result.kind == PersistenceErrorKind.UNIQUE_VIOLATION
        assert result.is_conflict
        assert result.fields == ["email"]
        assert "E11000 duplicate key error" in str(result)

    def test_duplicate_key_without_details(self):
        result = classify_storage_error(DuplicateKeyError("E11000", 11000))
        assert result.is_conflict
        assert result.fields == []

    @pytest.mark.parametrize(
        "error",
        [ServerSelectionTimeoutError("No servers found"), AutoReconnect("connection reset")],
    )
    def test_connection_errors_are_unavailable(self, error):
        result = classify_storage_error(error)
        assert result.kind == PersistenceErrorKind.UNAVAILABLE
        assert not result.is_conflict

    @pytest.mark.parametrize(
        "error",
        [OperationFailure("not authorized", 13), WriteError("document too large", 2)],
    )
    def test_other_errors(self, error):
        result = classify_storage_error(error)
        assert result.kind == PersistenceErrorKind.OTHER
        assert str(error) == str(result)


class TestCollections:
    @pytest.mark.parametrize(
        "repository_class, name",
        [
            (CandidateRepository, "candidates"),
            (EducationRepository, "educations"),
            (WorkExperienceRepository, "work_experiences"),
            (ResumeRepository, "resumes"),
        ],
    )
    def test_collection_names(self, repository_class, name):
        assert repository_class(db_manager=MagicMock()).collection_name == name

    def test_singleton(self):
        assert get_candidate_repository() is get_candidate_repository()


class TestCreateAsync:
    @pytest.fixture
    def collection(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock(
            return_value=SimpleNamespace(inserted_id=ObjectId())
        )
        return collection

    @pytest.fixture
    def repository(self, collection):
        db_manager = MagicMock()
        db_manager.get_async_collection.return_value = collection
        return CandidateRepository(db_manager=db_manager)

    @pytest.mark.asyncio
    async def test_assigns_inserted_id(self, repository, collection):
        candidate = Candidate(name="John Doe", email="john.doe@example.com")

        result = await repository.create_async(candidate)

        assert result is candidate
        assert result.id == collection.insert_one.return_value.inserted_id
        document = collection.insert_one.call_args.args[0]
        assert document["email"] == "john.doe@example.com"
        assert "_id" not in document
        assert document["created_at"] == document["updated_at"]

    @pytest.mark.asyncio
    async def test_uses_own_collection(self, collection):
        db_manager = MagicMock()
        db_manager.get_async_collection.return_value = collection
        repository = EducationRepository(db_manager=db_manager)

        await repository.create_async(Education(degree="BSc", institution="University X"))

        db_manager.get_async_collection.assert_called_once_with("educations")

    @pytest.mark.asyncio
    async def test_duplicate_key_raises_conflict(self, repository, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error", 11000, {"keyPattern": {"email": 1}}
        )
        candidate = Candidate(name="John Doe", email="john.doe@example.com")

        with pytest.raises(PersistenceError) as exc_info:
            await repository.create_async(candidate)

        assert exc_info.value.kind == PersistenceErrorKind.UNIQUE_VIOLATION
        assert isinstance(exc_info.value.__cause__, DuplicateKeyError)
        assert candidate.id is None

    @pytest.mark.asyncio
    async def test_non_driver_errors_not_wrapped(self, repository, collection):
        collection.insert_one.side_effect = RuntimeError("event loop closed")

        with pytest.raises(RuntimeError, match="event loop closed"):
            await repository.create_async(Candidate(name="John Doe", email="j@example.com"))
