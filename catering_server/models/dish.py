"""
Dish model: a caterer's catalog entry, priced per person.
"""
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, ForeignKey
from sqlalchemy.orm import relationship

from ..db import Base


class Dish(Base):
    __tablename__ = "dishes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    image_url = Column(String, nullable=True)

    caterer_id = Column(Integer, ForeignKey(
        "users.id", ondelete="CASCADE"), nullable=False, index=True)
    cuisine_type_id = Column(Integer, ForeignKey(
        "cuisine_types.id"), nullable=False)
    category_id = Column(Integer, ForeignKey(
        "categories.id"), nullable=True)
    sub_category_id = Column(Integer, ForeignKey(
        "sub_categories.id"), nullable=True)

    # Portioning
    quantity_in_gm = Column(Integer, nullable=True)
    pieces = Column(Integer, nullable=False, default=1)

    price = Column(Numeric(10, 2), nullable=False)  # per person
    currency = Column(String(3), nullable=False, default="AED")
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    # Relationships
    caterer = relationship("User", back_populates="dishes")
    cuisine_type = relationship("CuisineType", lazy="joined")
    category = relationship("Category", lazy="joined")
    sub_category = relationship("SubCategory", lazy="joined")
    package_items = relationship(
        "PackageItem", back_populates="dish", lazy="select")
