"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities, the
create/update payload schemas, and the per-entity partial-update merges.

Author: TM3
Date: 2026-10-18
"""
from nile.domain.business import Business, BusinessCreate, BusinessUpdate
from nile.domain.category import Category, CategoryCreate, CategoryUpdate
from nile.domain.customer import Customer, CustomerCreate, CustomerUpdate
from nile.domain.enums import PaymentMethod, PaymentStatus
from nile.domain.merge import MergeOptions, merge_partial
from nile.domain.payment import Payment, PaymentCreate, PaymentUpdate
from nile.domain.product import Product, ProductCreate, ProductUpdate

__all__ = [
    'Business', 'BusinessCreate', 'BusinessUpdate',
    'Category', 'CategoryCreate', 'CategoryUpdate',
    'Customer', 'CustomerCreate', 'CustomerUpdate',
    'Payment', 'PaymentCreate', 'PaymentUpdate', 'PaymentMethod', 'PaymentStatus',
    'Product', 'ProductCreate', 'ProductUpdate',
    'MergeOptions', 'merge_partial',
]
