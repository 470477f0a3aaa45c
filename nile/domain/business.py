"""
Business Domain Model

Author: TM3
Date: 2026-10-18
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_partial

BUSINESS_MERGE_FIELDS = (
    "name",
    "username",
    "email",
    "phone_number",
    "address",
    "website",
    "logo",
)
BUSINESS_REQUIRED_FIELDS = ("name",)


class Business(BaseModel):
    """Business domain model - a seller that owns products"""

    id: int = Field(..., description="Internal business ID")
    name: str = Field(..., description="Business name")
    username: Optional[str] = Field(None, description="Username")
    email: Optional[str] = Field(None, description="Contact email")
    phone_number: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Address")
    website: Optional[str] = Field(None, description="Website URL")
    logo: Optional[str] = Field(None, description="Logo URL")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class BusinessCreate(BaseModel):
    """Schema for creating a new business"""
    name: str = Field(..., min_length=1, max_length=255)
    username: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    website: Optional[str] = Field(None, max_length=500)
    logo: Optional[str] = Field(None, max_length=500)


class BusinessUpdate(BaseModel):
    """Schema for updating an existing business"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    username: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    website: Optional[str] = Field(None, max_length=500)
    logo: Optional[str] = Field(None, max_length=500)


def merge_business(business, patch: BusinessUpdate, options: MergeOptions = DEFAULT_MERGE_OPTIONS):
    return merge_partial(business, patch, BUSINESS_MERGE_FIELDS, options, BUSINESS_REQUIRED_FIELDS)
