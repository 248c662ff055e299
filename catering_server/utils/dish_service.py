"""
Dish catalog of a caterer.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import ConflictError, NotFoundOrForbidden, ValidationError
from ..models.category import Category, CuisineType, SubCategory
from ..models.dish import Dish
from ..models.package_item import PackageItem
from .formatters import format_category, format_dish
from .lookups import get_caterer

logger = logging.getLogger(__name__)

DISH_NOT_FOUND = "Dish not found or you don't have permission to access it"


def _cuisine_type_by_name(db: Session, name: str) -> CuisineType:
    cuisine_type = db.query(CuisineType).filter(
        CuisineType.name == name).first()
    if not cuisine_type:
        raise ValidationError(f'Cuisine type "{name}" not found')
    return cuisine_type


def _category_by_name(db: Session, name: str) -> Category:
    category = db.query(Category).filter(Category.name == name).first()
    if not category:
        raise ValidationError(f'Category "{name}" not found')
    return category


def _sub_category_by_name(db: Session, name: str, category: Optional[Category]) -> SubCategory:
    """Sub category names are only unique inside a category"""
    if category is None:
        raise ValidationError("Sub category requires a category to be selected")
    sub_category = db.query(SubCategory).filter(
        SubCategory.name == name,
        SubCategory.category_id == category.id,
    ).first()
    if not sub_category:
        raise ValidationError(
            f'Sub category "{name}" not found for category "{category.name}"')
    return sub_category


class DishService:

    @staticmethod
    def create(db: Session, caterer_id: int, data) -> Dish:
        get_caterer(db, caterer_id)

        cuisine_type = _cuisine_type_by_name(db, data.cuisine_type)
        category = _category_by_name(db, data.category) if data.category else None
        sub_category = None
        if data.sub_category:
            sub_category = _sub_category_by_name(db, data.sub_category, category)

        dish = Dish(
            name=data.name,
            image_url=data.image_url,
            caterer_id=caterer_id,
            cuisine_type_id=cuisine_type.id,
            category_id=category.id if category else None,
            sub_category_id=sub_category.id if sub_category else None,
            quantity_in_gm=data.quantity_in_gm,
            pieces=data.pieces or 1,
            price=data.price,
            currency=data.currency or settings.DEFAULT_CURRENCY,
            is_active=True if data.is_active is None else data.is_active,
        )
        db.add(dish)
        db.commit()
        db.refresh(dish)
        return dish

    @staticmethod
    def list_grouped(db: Session, caterer_id: int, category_id: Optional[int] = None) -> Dict:
        """Dishes grouped by category, every category listed even when empty"""
        get_caterer(db, caterer_id)

        categories = db.query(Category).order_by(Category.name).all()
        query = db.query(Dish).filter(Dish.caterer_id == caterer_id)
        if category_id is not None:
            query = query.filter(Dish.category_id == category_id)
        dishes = query.order_by(Dish.created_at.desc(), Dish.id.desc()).all()

        by_category: Dict[int, List] = {}
        uncategorized = []
        for dish in dishes:
            if dish.category_id:
                by_category.setdefault(dish.category_id, []).append(format_dish(dish))
            else:
                uncategorized.append(format_dish(dish))

        result = [
            {"category": format_category(category),
             "dishes": by_category.get(category.id, [])}
            for category in categories
        ]
        if uncategorized:
            result.append({
                "category": {
                    "id": None,
                    "name": "Uncategorized",
                    "description": "Dishes without a valid category",
                },
                "dishes": uncategorized,
            })
        return {"categories": result}

    @staticmethod
    def get(db: Session, dish_id: int, caterer_id: int) -> Dish:
        dish = db.query(Dish).filter(
            Dish.id == dish_id,
            Dish.caterer_id == caterer_id,
        ).first()
        if not dish:
            raise NotFoundOrForbidden(DISH_NOT_FOUND)
        return dish

    @staticmethod
    def update(db: Session, dish_id: int, caterer_id: int, data) -> Dish:
        """
        Partial update. Existing package items keep their price snapshot, so a
        price change here only reaches packages through items without one.
        """
        dish = DishService.get(db, dish_id, caterer_id)
        update_data = data.model_dump(exclude_unset=True)

        cuisine_name = update_data.pop("cuisine_type", None)
        category_name = update_data.pop("category", None)
        sub_category_name = update_data.pop("sub_category", None)

        if cuisine_name:
            dish.cuisine_type_id = _cuisine_type_by_name(db, cuisine_name).id

        category = None
        if category_name:
            category = _category_by_name(db, category_name)
            dish.category_id = category.id
        elif sub_category_name and dish.category_id:
            category = db.query(Category).filter(
                Category.id == dish.category_id).first()
        if sub_category_name:
            dish.sub_category_id = _sub_category_by_name(
                db, sub_category_name, category).id
        elif category_name and dish.sub_category and dish.sub_category.category_id != category.id:
            # old sub category belongs to the previous category
            dish.sub_category_id = None

        for field, value in update_data.items():
            if value is not None:
                setattr(dish, field, value)

        db.commit()
        db.refresh(dish)
        return dish

    @staticmethod
    def delete(db: Session, dish_id: int, caterer_id: int) -> None:
        dish = DishService.get(db, dish_id, caterer_id)

        in_use = db.query(PackageItem.id).filter(
            PackageItem.dish_id == dish.id).first()
        if in_use:
            raise ConflictError(
                "Cannot delete dish. It is being used in one or more packages")

        db.delete(dish)
        db.commit()
        logger.info(f"Dish {dish_id} deleted by caterer {caterer_id}")
