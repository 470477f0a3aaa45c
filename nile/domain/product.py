"""
Product Domain Model

Represents a product sold by a business, optionally filed under a category.

Author: TM3
Date: 2026-10-18
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_partial

# business_id / category_id are not merged here: ProductService resolves them
PRODUCT_MERGE_FIELDS = (
    "name",
    "description",
    "image",
    "price",
    "quantity",
)
PRODUCT_REQUIRED_FIELDS = ("name", "price", "quantity")


class Product(BaseModel):
    """
    Product domain model - what the API returns

    Fields:
        id: Internal product ID (primary key)
        name: Product name
        description: Product description (optional)
        image: Image URL or path (optional)
        price: Sale price
        quantity: Units in stock
        business_id: Owning business (always set)
        category_id: Category (optional)
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    image: Optional[str] = Field(None, description="Image reference")

    # Pricing and inventory
    price: Decimal = Field(..., description="Sale price")
    quantity: int = Field(..., description="Units in stock")

    # Relations
    business_id: int = Field(..., description="Owning business ID")
    category_id: Optional[int] = Field(None, description="Category ID")

    # Metadata
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,  # Allow creation from ORM objects
        json_encoders={
            Decimal: float,  # Convert Decimal to float for JSON
        }
    )


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(..., ge=0)
    business_id: int = Field(..., validation_alias=AliasChoices("business_id", "businessId"))
    category_id: Optional[int] = Field(None, validation_alias=AliasChoices("category_id", "categoryId"))


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    quantity: Optional[int] = Field(None, ge=0)
    business_id: Optional[int] = Field(None, validation_alias=AliasChoices("business_id", "businessId"))
    category_id: Optional[int] = Field(None, validation_alias=AliasChoices("category_id", "categoryId"))


def merge_product(product, patch: ProductUpdate, options: MergeOptions = DEFAULT_MERGE_OPTIONS):
    """Apply the plain (non-reference) fields of a product payload"""
    return merge_partial(product, patch, PRODUCT_MERGE_FIELDS, options, PRODUCT_REQUIRED_FIELDS)
