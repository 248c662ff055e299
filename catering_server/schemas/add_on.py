"""
Add-on schemas.
"""
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class AddOnCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(..., description="Whole currency units, rounded")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    is_active: Optional[bool] = True


class AddOnUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    is_active: Optional[bool] = None
