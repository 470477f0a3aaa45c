"""
Customer table
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nile.core.database import Base


class Customer(Base):
    """
    Clientes - owners of payments
    """
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255))
    first_name = Column(String(100))
    last_name = Column(String(100))
    username = Column(String(100), index=True)
    email = Column(String(255), index=True)
    phone_number = Column(String(50))
    address = Column(Text)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    payments = relationship("Payment", back_populates="customer", cascade="all, delete-orphan")
