"""SQLAlchemy ORM models for products and product variations."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(120), nullable=False, default="", index=True)
    base_price = Column(Numeric(12, 2), nullable=False)
    discount_price = Column(Numeric(12, 2), nullable=True)
    discount_active = Column(Boolean, nullable=False, default=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    variations = relationship(
        "ProductVariationModel",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariationModel.name",
    )


class ProductVariationModel(Base):
    """SQLAlchemy ORM model for product_variations table."""

    __tablename__ = "product_variations"

    id = Column(String(36), primary_key=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    product = relationship("ProductModel", back_populates="variations")
