"""
Category Repository - Data Access Layer for Categories
"""
from nile.models import Category
from nile.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category
    resource_name = "Category"
