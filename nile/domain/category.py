"""
Category Domain Model

Author: TM3
Date: 2026-10-18
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_partial

CATEGORY_MERGE_FIELDS = ("name", "description")
CATEGORY_REQUIRED_FIELDS = ("name",)


class Category(BaseModel):
    """Category domain model"""

    id: int = Field(..., description="Internal category ID")
    name: str = Field(..., description="Category name")
    description: Optional[str] = Field(None, description="Category description")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(BaseModel):
    """Schema for creating a new category"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class CategoryUpdate(BaseModel):
    """Schema for updating an existing category"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


def merge_category(category, patch: CategoryUpdate, options: MergeOptions = DEFAULT_MERGE_OPTIONS):
    return merge_partial(category, patch, CATEGORY_MERGE_FIELDS, options, CATEGORY_REQUIRED_FIELDS)
