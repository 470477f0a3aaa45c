"""
Product Service
Handles product creation and updates with business/category resolution

A product always belongs to an existing business and may be filed under an
existing category. References are resolved before anything is written, so a
bad id never leaves a partial row behind.

Author: TM3
Date: 2026-10-18
"""
import logging

from sqlalchemy.orm import Session

from nile.core.database import transactional
from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, is_present, required_value
from nile.domain.product import ProductCreate, ProductUpdate, merge_product
from nile.models import Product
from nile.repositories.business_repository import BusinessRepository
from nile.repositories.category_repository import CategoryRepository
from nile.repositories.product_repository import ProductRepository
from nile.services.base import BaseService

logger = logging.getLogger(__name__)


class ProductService(BaseService[Product]):
    """
    Service for the product catalog

    Handles:
    - Business lookup (required) on create and when business_id is sent on update
    - Category lookup when category_id is sent
    - Partial updates of the plain product fields
    """

    repository_class = ProductRepository

    def __init__(self, db: Session, merge_options: MergeOptions = DEFAULT_MERGE_OPTIONS):
        super().__init__(db, merge_options)
        self.business_repository = BusinessRepository(db)
        self.category_repository = CategoryRepository(db)

    def create(self, payload: ProductCreate) -> Product:
        """
        Create a product

        Raises:
            ReferenceNotFoundError: If business_id (or a given category_id) does not exist
        """
        with transactional(self.db):
            business = self.business_repository.get_reference(payload.business_id)
            category = None
            if payload.category_id is not None:
                category = self.category_repository.get_reference(payload.category_id)

            product = Product(
                name=payload.name,
                description=payload.description,
                image=payload.image,
                price=payload.price,
                quantity=payload.quantity,
                business=business,
                category=category,
            )
            product = self.repository.save(product)

        logger.info(f"Created product {product.id} for business {business.id}")
        return product

    def update(self, product_id: int, payload: ProductUpdate) -> Product:
        """
        Apply a partial update to a product

        Only the reference ids present in the payload are re-resolved; an
        update that does not mention business_id/category_id keeps the current
        links without looking them up again.

        Raises:
            NotFoundError: If the product does not exist
            ReferenceNotFoundError: If a sent business_id/category_id does not exist
            InvalidPayloadError: If business_id is sent as null with ignore_none=False
        """
        with transactional(self.db):
            product = self.repository.get_by_id(product_id)

            if is_present(payload, "business_id", self.merge_options):
                business_id = required_value(payload, "business_id")
                product.business = self.business_repository.get_reference(business_id)
            if is_present(payload, "category_id", self.merge_options):
                # An explicit null (only reachable with ignore_none=False) unfiles the product
                if payload.category_id is None:
                    product.category = None
                else:
                    product.category = self.category_repository.get_reference(payload.category_id)

            merge_product(product, payload, self.merge_options)
            product = self.repository.save(product)

        logger.info(f"Updated product {product_id}")
        return product
