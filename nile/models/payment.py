"""
Payment table
"""
from sqlalchemy import Column, Integer, String, DateTime, DECIMAL, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nile.core.database import Base
from nile.domain.enums import PaymentMethod, PaymentStatus


class Payment(Base):
    """
    Pagos - each one belongs to exactly one customer

    amount was a text column in the first schema; it is a proper DECIMAL now.
    """
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)

    # Identificación
    transaction_id = Column(String(100), nullable=False, unique=True, index=True)

    # Monto
    amount = Column(DECIMAL(12, 2), nullable=False)

    # Estados
    payment_method = Column(Enum(PaymentMethod, native_enum=False, length=32), nullable=False)
    payment_status = Column(Enum(PaymentStatus, native_enum=False, length=32), nullable=False, index=True)

    # Fechas
    payment_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relaciones
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), index=True, nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="payments")
