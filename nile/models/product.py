"""
Product table
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, DECIMAL, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nile.core.database import Base


class Product(Base):
    """
    Productos del catálogo

    business_id is required, category_id is optional.
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text)
    image = Column(String(500))

    # Precio e inventario
    price = Column(DECIMAL(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    # Relaciones
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), index=True, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    business = relationship("Business", back_populates="products")
    category = relationship("Category", back_populates="products")
