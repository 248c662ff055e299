"""
PackageItem model: one dish line of a package, or a draft line not yet in any package.
"""
from dataclasses import dataclass
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from ..db import Base


@dataclass(frozen=True)
class Unattached:
    """Draft item, reusable inventory not linked to any package."""

    @property
    def is_draft(self):
        return True


@dataclass(frozen=True)
class AttachedTo:
    """Item linked to exactly one package."""
    package_id: int

    @property
    def is_draft(self):
        return False


class PackageItem(Base):
    __tablename__ = "package_items"

    id = Column(Integer, primary_key=True, index=True)
    dish_id = Column(Integer, ForeignKey("dishes.id"), nullable=False)
    # denormalized from the dish owner for ownership filters
    caterer_id = Column(Integer, ForeignKey(
        "users.id", ondelete="CASCADE"), nullable=False, index=True)
    package_id = Column(Integer, ForeignKey(
        "packages.id", ondelete="SET NULL"), nullable=True, index=True)

    people_count = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    is_optional = Column(Boolean, nullable=False, default=False)
    is_addon = Column(Boolean, nullable=False, default=False)
    price_at_time = Column(Numeric(10, 2), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    # Relationships
    dish = relationship("Dish", back_populates="package_items", lazy="joined")
    package = relationship("Package", back_populates="items")

    @property
    def attachment(self):
        """Unattached() for drafts, AttachedTo(package_id) otherwise."""
        if self.package_id is None:
            return Unattached()
        return AttachedTo(self.package_id)

    def attach(self, package_id: int):
        self.package_id = package_id

    def detach(self):
        self.package_id = None
