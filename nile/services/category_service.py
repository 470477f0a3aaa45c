"""
Category Service
"""
import logging

from nile.core.database import transactional
from nile.domain.category import CategoryCreate, CategoryUpdate, merge_category
from nile.models import Category
from nile.repositories.category_repository import CategoryRepository
from nile.services.base import BaseService

logger = logging.getLogger(__name__)


class CategoryService(BaseService[Category]):
    repository_class = CategoryRepository

    def create(self, payload: CategoryCreate) -> Category:
        with transactional(self.db):
            category = self.repository.save(Category(**payload.model_dump()))
        logger.info(f"Created category {category.id}")
        return category

    def update(self, category_id: int, payload: CategoryUpdate) -> Category:
        with transactional(self.db):
            category = self.repository.get_by_id(category_id)
            merge_category(category, payload, self.merge_options)
            category = self.repository.save(category)
        logger.info(f"Updated category {category_id}")
        return category
