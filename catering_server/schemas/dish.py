"""
Dish schemas. Cuisine type, category and sub category are given by name.
"""
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class DishCreate(BaseModel):
    name: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    cuisine_type: str = Field(..., description="Cuisine type name")
    category: Optional[str] = Field(None, description="Category name")
    sub_category: Optional[str] = Field(
        None, description="Sub category name, requires a category")
    quantity_in_gm: Optional[int] = Field(None, ge=0)
    pieces: Optional[int] = Field(None, ge=1)
    price: Decimal = Field(..., ge=0, description="Price per person")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    is_active: Optional[bool] = True


class DishUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    cuisine_type: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    quantity_in_gm: Optional[int] = Field(None, ge=0)
    pieces: Optional[int] = Field(None, ge=1)
    price: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    is_active: Optional[bool] = None
