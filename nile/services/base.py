"""
Base Service - shared read/delete operations

Each resource service extends BaseService and adds its own create/update,
where payload mapping and reference resolution differ per entity. Every
public method runs inside exactly one transactional() block.

Author: TM3
Date: 2026-10-18
"""
import logging
from typing import Generic, List, Type, TypeVar

from sqlalchemy.orm import Session

from nile.core.database import transactional
from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions
from nile.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class BaseService(Generic[ModelT]):
    """
    CRUD plumbing shared by every resource

    Args:
        db: Request-scoped SQLAlchemy session
        merge_options: Partial-update behaviour for this service instance
    """

    repository_class: Type[BaseRepository]

    def __init__(self, db: Session, merge_options: MergeOptions = DEFAULT_MERGE_OPTIONS):
        self.db = db
        self.merge_options = merge_options
        self.repository = self.repository_class(db)

    @property
    def resource_name(self) -> str:
        return self.repository.resource_name

    def get_list(self) -> List[ModelT]:
        """Return every record (unpaginated)"""
        with transactional(self.db):
            return self.repository.find_all()

    def get_by_id(self, entity_id: int) -> ModelT:
        """Return one record or raise NotFoundError"""
        with transactional(self.db):
            return self.repository.get_by_id(entity_id)

    def delete(self, entity_id: int) -> None:
        """
        Delete a record

        Raises:
            NotFoundError: If no record exists for entity_id
        """
        with transactional(self.db):
            entity = self.repository.get_by_id(entity_id)
            self.repository.delete(entity)
        logger.warning(f"Deleted {self.resource_name} {entity_id}")
