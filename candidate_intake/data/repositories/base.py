"""
Base repository class providing document persistence.

All entity-specific repositories inherit from this base class. Driver
errors are classified here so callers never inspect pymongo error codes.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import (
    ConnectionFailure,
    DuplicateKeyError,
    PyMongoError,
)
from pymongo.results import InsertOneResult

from candidate_intake.data.database import DatabaseManager, get_database_manager
from candidate_intake.data.models.base import BaseDocument
from candidate_intake.errors import PersistenceError, PersistenceErrorKind
from candidate_intake.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)


def classify_storage_error(error: PyMongoError) -> PersistenceError:
    """Translate a driver error into a PersistenceError with an explicit kind."""
    if isinstance(error, DuplicateKeyError):
        details = error.details or {}
        fields = list((details.get("keyPattern") or details.get("keyValue") or {}).keys())
        return PersistenceError(
            str(error), kind=PersistenceErrorKind.UNIQUE_VIOLATION, fields=fields
        )
    # Covers ServerSelectionTimeoutError, AutoReconnect and NetworkTimeout
    if isinstance(error, ConnectionFailure):
        return PersistenceError(str(error), kind=PersistenceErrorKind.UNAVAILABLE)
    return PersistenceError(str(error), kind=PersistenceErrorKind.OTHER)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing document inserts.

    Subclasses must define the collection name.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        """Initialize repository with database connection."""
        self._db_manager = db_manager or get_database_manager()

    def _get_async_collection(self) -> AsyncIOMotorCollection:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(self.collection_name)

    def _to_document(self, model: T) -> dict[str, Any]:
        """Convert Pydantic model to MongoDB document."""
        return model.model_dump_mongo()

    async def create_async(self, model: T) -> T:
        """
        Insert a new document and assign its generated id to the model.

        Raises:
            PersistenceError: if the write fails, classified by kind.
        """
        collection = self._get_async_collection()
        now = datetime.utcnow()
        model.created_at = now
        model.updated_at = now
        document = self._to_document(model)

        try:
            result: InsertOneResult = await collection.insert_one(document)
        except PyMongoError as e:
            error = classify_storage_error(e)
            logger.warning(
                f"Insert into {self.collection_name} failed ({error.kind.value}): {e}"
            )
            raise error from e

        model.id = result.inserted_id
        logger.debug(f"Created {self.collection_name} document: {result.inserted_id}")
        return model
