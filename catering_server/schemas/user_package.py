"""
Schemas for packages composed by buyers.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class UserPackageCreate(BaseModel):
    """Schema for a buyer building a package from a caterer's dishes"""
    caterer_id: int
    name: Optional[str] = None
    dish_ids: List[int] = Field(..., min_length=1)
    minimum_people: Optional[int] = Field(
        None, ge=1, description="Guest count, defaults to the caterer's minimum")
    occasion_ids: Optional[List[int]] = None
