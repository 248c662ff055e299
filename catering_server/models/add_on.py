"""
AddOn model: priced supplement attached to a FIXED package.
"""
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, String, ForeignKey, Text
from sqlalchemy.orm import relationship

from ..db import Base


class AddOn(Base):
    __tablename__ = "add_ons"

    id = Column(Integer, primary_key=True, index=True)
    package_id = Column(Integer, ForeignKey(
        "packages.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)  # whole currency units
    currency = Column(String(3), nullable=False, default="AED")
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    package = relationship("Package", back_populates="add_ons")
