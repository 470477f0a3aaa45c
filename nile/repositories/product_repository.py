"""
Product Repository - Data Access Layer for Products
"""
from nile.models import Product
from nile.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product
    resource_name = "Product"
