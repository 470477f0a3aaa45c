"""
Business Service
"""
import logging

from nile.core.database import transactional
from nile.domain.business import BusinessCreate, BusinessUpdate, merge_business
from nile.models import Business
from nile.repositories.business_repository import BusinessRepository
from nile.services.base import BaseService

logger = logging.getLogger(__name__)


class BusinessService(BaseService[Business]):
    repository_class = BusinessRepository

    def create(self, payload: BusinessCreate) -> Business:
        with transactional(self.db):
            business = self.repository.save(Business(**payload.model_dump()))
        logger.info(f"Created business {business.id}")
        return business

    def update(self, business_id: int, payload: BusinessUpdate) -> Business:
        with transactional(self.db):
            business = self.repository.get_by_id(business_id)
            merge_business(business, payload, self.merge_options)
            business = self.repository.save(business)
        logger.info(f"Updated business {business_id}")
        return business
