"""
Business table
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nile.core.database import Base


class Business(Base):
    """
    Negocios - each one owns zero or more products
    """
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    username = Column(String(100), index=True)
    email = Column(String(255))
    phone_number = Column(String(50))
    address = Column(Text)
    website = Column(String(500))
    logo = Column(String(500))

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    products = relationship("Product", back_populates="business", cascade="all, delete-orphan")
