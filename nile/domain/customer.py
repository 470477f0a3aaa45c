"""
Customer Domain Model

Represents a customer of the platform.

Author: TM3
Date: 2026-10-18
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_partial

CUSTOMER_MERGE_FIELDS = (
    "name",
    "first_name",
    "last_name",
    "username",
    "email",
    "phone_number",
    "address",
)


class Customer(BaseModel):
    """
    Customer domain model - what the API returns

    Fields:
        id: Internal customer ID (primary key)
        name: Display name
        first_name / last_name: Personal names
        username: Login handle
        email: Contact email
        phone_number: Contact phone
        address: Postal address
        created_at: When the customer was created
        updated_at: When the customer was last updated
    """

    id: int = Field(..., description="Internal customer ID")
    name: Optional[str] = Field(None, description="Display name")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    username: Optional[str] = Field(None, description="Username")
    email: Optional[str] = Field(None, description="Email")
    phone_number: Optional[str] = Field(None, description="Phone number")
    address: Optional[str] = Field(None, description="Postal address")

    # Metadata
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""
    name: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    username: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None


class CustomerUpdate(CustomerCreate):
    """Schema for updating an existing customer (every field optional)"""


def merge_customer(customer, patch: CustomerUpdate, options: MergeOptions = DEFAULT_MERGE_OPTIONS):
    """Apply a partial customer payload onto a stored customer"""
    return merge_partial(customer, patch, CUSTOMER_MERGE_FIELDS, options)
