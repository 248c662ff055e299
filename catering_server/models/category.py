"""
Catalog metadata shared by all caterers: categories, sub categories and cuisine types.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..db import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    sub_categories = relationship(
        "SubCategory", back_populates="category", cascade="all, delete-orphan",
        order_by="SubCategory.name")


class SubCategory(Base):
    __tablename__ = "sub_categories"
    # names are only unique inside their category
    __table_args__ = (UniqueConstraint("category_id", "name"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey(
        "categories.id", ondelete="CASCADE"), nullable=False)

    category = relationship("Category", back_populates="sub_categories")


class CuisineType(Base):
    __tablename__ = "cuisine_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
