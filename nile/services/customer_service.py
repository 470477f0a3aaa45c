"""
Customer Service
"""
import logging

from nile.core.database import transactional
from nile.domain.customer import CustomerCreate, CustomerUpdate, merge_customer
from nile.models import Customer
from nile.repositories.customer_repository import CustomerRepository
from nile.services.base import BaseService

logger = logging.getLogger(__name__)


class CustomerService(BaseService[Customer]):
    repository_class = CustomerRepository

    def create(self, payload: CustomerCreate) -> Customer:
        with transactional(self.db):
            customer = self.repository.save(Customer(**payload.model_dump()))
        logger.info(f"Created customer {customer.id}")
        return customer

    def update(self, customer_id: int, payload: CustomerUpdate) -> Customer:
        with transactional(self.db):
            customer = self.repository.get_by_id(customer_id)
            merge_customer(customer, payload, self.merge_options)
            customer = self.repository.save(customer)
        logger.info(f"Updated customer {customer_id}")
        return customer
