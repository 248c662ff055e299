"""
Occasion model: weddings, birthdays, corporate events... linked to packages.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from ..db import Base
from .package import package_occasions


class Occasion(Base):
    __tablename__ = "occasions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    packages = relationship(
        "Package", secondary=package_occasions, back_populates="occasions",
        lazy="select")
