"""
Customer Repository - Data Access Layer for Customers
"""
from nile.models import Customer
from nile.repositories.base import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    model = Customer
    resource_name = "Customer"
