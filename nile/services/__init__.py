"""
Service Layer - one service per resource

Author: TM3
Date: 2026-10-18
"""
from nile.services.business_service import BusinessService
from nile.services.category_service import CategoryService
from nile.services.customer_service import CustomerService
from nile.services.payment_service import PaymentService
from nile.services.product_service import ProductService

__all__ = [
    'BusinessService',
    'CategoryService',
    'CustomerService',
    'PaymentService',
    'ProductService',
]
