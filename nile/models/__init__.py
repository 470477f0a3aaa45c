"""
Modelos de base de datos
"""
from .customer import Customer
from .business import Business
from .category import Category
from .product import Product
from .payment import Payment

__all__ = [
    "Customer",
    "Business",
    "Category",
    "Product",
    "Payment",
]
