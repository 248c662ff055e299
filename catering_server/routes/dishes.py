"""
Caterer dish catalog routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth_utils import caterer_required
from ..db import get_db
from ..models.user import User
from ..schemas.dish import DishCreate, DishUpdate
from ..utils.dish_service import DishService
from ..utils.formatters import format_dish

router = APIRouter(prefix="/caterer/dishes", tags=["Caterer Dishes"])


@router.get("")
def list_dishes(
    category_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    """Caterer's dishes grouped by category"""
    return DishService.list_grouped(db, current.id, category_id)


@router.post("", status_code=201)
def create_dish(
    request: DishCreate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    dish = DishService.create(db, current.id, request)
    return format_dish(dish)


@router.get("/{dish_id}")
def get_dish(
    dish_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_dish(DishService.get(db, dish_id, current.id))


@router.put("/{dish_id}")
def update_dish(
    dish_id: int,
    request: DishUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_dish(DishService.update(db, dish_id, current.id, request))


@router.delete("/{dish_id}")
def delete_dish(
    dish_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    DishService.delete(db, dish_id, current.id)
    return {"message": "Dish deleted successfully", "id": dish_id}
