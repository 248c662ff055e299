"""
User model: Caterer, buyer (User) and Admin accounts, plus caterer profile info.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String, ForeignKey, Enum
from sqlalchemy.orm import relationship
import enum

from ..db import Base


class UserType(str, enum.Enum):
    CATERER = "CATERER"
    USER = "USER"
    ADMIN = "ADMIN"


class CatererStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=True)
    type = Column(Enum(UserType), nullable=False, default=UserType.USER)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    caterer_info = relationship(
        "CatererInfo", back_populates="caterer", uselist=False,
        cascade="all, delete-orphan")
    dishes = relationship(
        "Dish", back_populates="caterer", lazy="select", cascade="all")


class CatererInfo(Base):
    __tablename__ = "caterer_info"

    id = Column(Integer, primary_key=True, index=True)
    caterer_id = Column(Integer, ForeignKey(
        "users.id", ondelete="CASCADE"), unique=True, nullable=False)
    business_name = Column(String, nullable=False)
    # floor applied to every package that doesn't pin its own minimum_people
    minimum_guests = Column(Integer, nullable=True)
    status = Column(Enum(CatererStatus),
                    default=CatererStatus.PENDING, nullable=False)

    caterer = relationship("User", back_populates="caterer_info")
