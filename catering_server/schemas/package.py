"""
Package schemas for the caterer side.
"""
from decimal import Decimal
from pydantic import AliasChoices, BaseModel, Field
from typing import List, Optional

from ..models.package import CustomisationType


class CategorySelectionIn(BaseModel):
    category_id: int
    num_dishes_to_select: Optional[int] = Field(
        None, ge=1, description="null means select all dishes in the category")


class PackageBase(BaseModel):
    cover_image_url: Optional[str] = None
    minimum_people: Optional[int] = Field(None, ge=1)
    total_price: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    rating: Optional[float] = Field(None, ge=0, le=5)
    is_active: Optional[bool] = None
    is_available: Optional[bool] = None
    package_item_ids: Optional[List[int]] = Field(
        None, description="Existing package item ids (drafts or already linked)")
    dish_ids: Optional[List[int]] = Field(
        None, description="Raw dish ids, a new item is created for each")
    category_selections: Optional[List[CategorySelectionIn]] = None
    occasion_ids: Optional[List[int]] = Field(
        None, validation_alias=AliasChoices("occasion_ids", "occassion"))


class PackageCreate(PackageBase):
    name: str = Field(..., min_length=1)
    customisation_type: CustomisationType = CustomisationType.FIXED


class PackageUpdate(PackageBase):
    """Patch-style update: only keys present in the body are applied"""
    name: Optional[str] = Field(None, min_length=1)
    customisation_type: Optional[CustomisationType] = None
    reprice_from_caterer_defaults: bool = Field(
        True,
        description="Re-resolve minimum_people from the caterer's minimum guests "
                    "when minimum_people is not sent")
