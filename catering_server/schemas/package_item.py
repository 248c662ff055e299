"""
Package item schemas.
"""
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional


class PackageItemCreate(BaseModel):
    """Schema for creating a package item, linked or draft"""
    dish_id: int = Field(..., description="Dish this line refers to")
    people_count: int = Field(..., ge=1)
    quantity: Optional[int] = Field(None, ge=1, description="Defaults to 1")
    price_at_time: Optional[Decimal] = Field(
        None, ge=0, description="Price snapshot, defaults to the dish price")
    is_optional: Optional[bool] = False
    is_addon: Optional[bool] = False
    package_id: Optional[int] = Field(
        None, description="Leave empty to create a draft item")


class PackageItemUpdate(BaseModel):
    """Partial update. Sending package_id: null detaches the item."""
    dish_id: Optional[int] = None
    people_count: Optional[int] = Field(None, ge=1)
    quantity: Optional[int] = Field(None, ge=1)
    price_at_time: Optional[Decimal] = Field(None, ge=0)
    is_optional: Optional[bool] = None
    is_addon: Optional[bool] = None
    package_id: Optional[int] = None


class LinkItemsRequest(BaseModel):
    item_ids: List[int] = Field(..., min_length=1)
