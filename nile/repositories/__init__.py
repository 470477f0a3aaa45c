"""
Repository Layer - Data Access

This layer handles all database access and returns ORM entities.
Repositories abstract away SQLAlchemy details from business logic.

Author: TM3
Date: 2026-10-18
"""
from nile.repositories.base import BaseRepository
from nile.repositories.business_repository import BusinessRepository
from nile.repositories.category_repository import CategoryRepository
from nile.repositories.customer_repository import CustomerRepository
from nile.repositories.payment_repository import PaymentRepository
from nile.repositories.product_repository import ProductRepository

__all__ = [
    'BaseRepository',
    'BusinessRepository',
    'CategoryRepository',
    'CustomerRepository',
    'PaymentRepository',
    'ProductRepository',
]
