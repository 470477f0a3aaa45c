"""
Payment Domain Model

Author: TM3
Date: 2026-10-18
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from nile.domain.enums import PaymentMethod, PaymentStatus
from nile.domain.merge import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_partial

# customer_id is resolved by PaymentService, not merged blindly
PAYMENT_MERGE_FIELDS = (
    "transaction_id",
    "amount",
    "payment_method",
    "payment_status",
    "payment_date",
)
# Every merged payment column is NOT NULL
PAYMENT_REQUIRED_FIELDS = PAYMENT_MERGE_FIELDS

CUSTOMER_ID_ALIASES = AliasChoices("customer_id", "customerId", "costumer_id", "costumerId")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Payment(BaseModel):
    """
    Payment domain model

    Fields:
        id: Internal payment ID
        transaction_id: Unique transaction reference
        amount: Amount paid
        payment_method: How it was paid (CARD, PAYPAL, ...)
        payment_status: PENDING, COMPLETED, FAILED or REFUNDED
        payment_date: When it was paid
        customer_id: Paying customer
    """

    id: int = Field(..., description="Internal payment ID")
    transaction_id: str = Field(..., description="Unique transaction reference")
    amount: Decimal = Field(..., description="Amount")
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    payment_date: datetime
    customer_id: int = Field(..., description="Customer ID")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            Decimal: float,
        }
    )


class PaymentCreate(BaseModel):
    """Schema for registering a payment"""
    transaction_id: str = Field(..., min_length=3, max_length=100)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    payment_method: PaymentMethod
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_date: datetime = Field(default_factory=_utcnow)
    customer_id: int = Field(..., validation_alias=CUSTOMER_ID_ALIASES)


class PaymentUpdate(BaseModel):
    """Schema for updating an existing payment"""
    transaction_id: Optional[str] = Field(None, min_length=3, max_length=100)
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None
    payment_date: Optional[datetime] = None
    customer_id: Optional[int] = Field(None, validation_alias=CUSTOMER_ID_ALIASES)


def merge_payment(payment, patch: PaymentUpdate, options: MergeOptions = DEFAULT_MERGE_OPTIONS):
    return merge_partial(payment, patch, PAYMENT_MERGE_FIELDS, options, PAYMENT_REQUIRED_FIELDS)
