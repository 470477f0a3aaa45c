"""
Base Repository - shared SQLAlchemy data access

Every entity repository extends BaseRepository with its ORM model. All
session work for a resource is centralized here; services never touch the
Session query API directly.

Author: TM3
Date: 2026-10-18
"""
import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from nile.core.exceptions import ConflictError, NotFoundError, PersistenceError, ReferenceNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# SQLSTATE for unique_violation (PostgreSQL)
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when an IntegrityError comes from a UNIQUE constraint (PostgreSQL or SQLite)"""
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    return "unique" in str(error.orig).lower()


class BaseRepository(Generic[ModelT]):
    """
    Repository over one ORM model

    Subclasses set ``model`` and ``resource_name`` (used in error messages).
    """

    model: Type[ModelT]
    resource_name: str = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[ModelT]:
        """Return every record ordered by id"""
        try:
            return self.db.query(self.model).order_by(self.model.id).all()
        except SQLAlchemyError as e:
            raise self._translate(e, "listing")

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Find a record by primary key

        Returns:
            The ORM instance or None if not found
        """
        try:
            return self.db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._translate(e, "reading")

    def get_by_id(self, entity_id: int) -> ModelT:
        """Find a record by primary key or raise NotFoundError"""
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity

    def get_reference(self, entity_id: int) -> ModelT:
        """
        Lookup-or-fail for foreign keys

        Used by services before attaching a relationship; a missing record is
        the caller's payload problem, so it raises ReferenceNotFoundError.
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            logger.warning(f"Reference to missing {self.resource_name} {entity_id}")
            raise ReferenceNotFoundError(self.resource_name, entity_id)
        return entity

    def exists(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def save(self, entity: ModelT) -> ModelT:
        """
        Insert or update an entity

        Flushes so the store assigns the id and server-side timestamps, then
        refreshes the instance. Committing is the caller's transaction.
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            raise self._translate(e, "saving")

    def delete(self, entity: ModelT) -> None:
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            raise self._translate(e, "deleting")

    def delete_by_id(self, entity_id: int) -> bool:
        """
        Delete a record by primary key

        Returns:
            True if a record was deleted, False if none existed
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True

    def _translate(self, error: SQLAlchemyError, action: str) -> Exception:
        """Map a SQLAlchemy failure onto the domain error taxonomy"""
        if isinstance(error, IntegrityError) and is_unique_violation(error):
            logger.warning(f"Unique constraint violated {action} {self.resource_name}: {error.orig}")
            return ConflictError(f"{self.resource_name} violates a uniqueness constraint")
        if isinstance(error, IntegrityError):
            logger.warning(f"Integrity error {action} {self.resource_name}: {error.orig}")
            return PersistenceError(f"{self.resource_name} violates a database constraint")
        logger.error(f"Database error {action} {self.resource_name}: {error}")
        return PersistenceError(f"Error {action} {self.resource_name}")
