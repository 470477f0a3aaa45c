"""
Business Repository - Data Access Layer for Businesses
"""
from nile.models import Business
from nile.repositories.base import BaseRepository


class BusinessRepository(BaseRepository[Business]):
    model = Business
    resource_name = "Business"
