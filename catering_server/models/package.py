"""
Package model: the sellable bundle, with its category selection rules and occasion links.
"""
from datetime import datetime
from sqlalchemy import (Boolean, Column, DateTime, Float, Integer, Numeric, String,
                        ForeignKey, Enum, Table)
from sqlalchemy.orm import relationship
import enum

from ..db import Base


class CustomisationType(str, enum.Enum):
    FIXED = "FIXED"
    CUSTOMISABLE = "CUSTOMISABLE"


class PackageCreator(str, enum.Enum):
    CATERER = "CATERER"
    USER = "USER"


package_occasions = Table(
    "package_occasions",
    Base.metadata,
    Column("package_id", Integer, ForeignKey(
        "packages.id", ondelete="CASCADE"), primary_key=True),
    Column("occasion_id", Integer, ForeignKey(
        "occasions.id", ondelete="CASCADE"), primary_key=True),
)


class Package(Base):
    __tablename__ = "packages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    cover_image_url = Column(String, nullable=True)

    caterer_id = Column(Integer, ForeignKey(
        "users.id", ondelete="CASCADE"), nullable=False, index=True)
    # set only for buyer-authored packages
    user_id = Column(Integer, ForeignKey(
        "users.id", ondelete="CASCADE"), nullable=True, index=True)
    created_by = Column(Enum(PackageCreator),
                        default=PackageCreator.CATERER, nullable=False)

    minimum_people = Column(Integer, nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False, default=0)
    is_custom_price = Column(Boolean, nullable=False, default=False)
    currency = Column(String(3), nullable=False, default="AED")
    customisation_type = Column(Enum(CustomisationType),
                                default=CustomisationType.FIXED, nullable=False)

    is_active = Column(Boolean, nullable=False, default=True)
    is_available = Column(Boolean, nullable=False, default=True)
    rating = Column(Float, nullable=True)

    revision = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    __mapper_args__ = {"version_id_col": revision}

    # Relationships
    caterer = relationship("User", foreign_keys=[caterer_id])
    user = relationship("User", foreign_keys=[user_id])
    items = relationship(
        "PackageItem", back_populates="package", lazy="select",
        order_by="PackageItem.id")
    category_selections = relationship(
        "PackageCategorySelection", back_populates="package",
        cascade="all, delete-orphan", order_by="PackageCategorySelection.id")
    add_ons = relationship(
        "AddOn", back_populates="package", cascade="all, delete-orphan",
        order_by="AddOn.id")
    occasions = relationship(
        "Occasion", secondary=package_occasions, back_populates="packages",
        lazy="select")

    def is_fixed(self):
        return self.customisation_type == CustomisationType.FIXED


class PackageCategorySelection(Base):
    __tablename__ = "package_category_selections"

    id = Column(Integer, primary_key=True, index=True)
    package_id = Column(Integer, ForeignKey(
        "packages.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey(
        "categories.id", ondelete="CASCADE"), nullable=False)
    # None means "select all dishes in this category"
    num_dishes_to_select = Column(Integer, nullable=True)

    package = relationship("Package", back_populates="category_selections")
    category = relationship("Category", lazy="joined")
