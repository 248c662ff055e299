"""
Ownership-checked lookups shared by the caterer services.

Every "not yours" case is reported exactly like "does not exist".
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..exceptions import (ConfigurationError, InvalidCaterer, NotFoundOrForbidden,
                          ValidationError)
from ..models.dish import Dish
from ..models.occasion import Occasion
from ..models.package import Package, PackageCreator
from ..models.package_item import PackageItem
from ..models.user import CatererInfo, User, UserType


def get_caterer(db: Session, caterer_id: int) -> User:
    """Load the acting user and make sure it is a caterer"""
    caterer = db.query(User).filter(User.id == caterer_id).first()
    if not caterer or caterer.type != UserType.CATERER:
        raise InvalidCaterer()
    return caterer


def caterer_packages(db: Session, caterer_id: int):
    """Query over the packages a caterer curates (buyer-authored ones excluded)"""
    return db.query(Package).filter(
        Package.caterer_id == caterer_id,
        Package.created_by == PackageCreator.CATERER,
    )


def get_owned_package(
    db: Session,
    package_id: int,
    caterer_id: int,
    message: str = "Package not found or does not belong to this caterer",
) -> Package:
    package = caterer_packages(db, caterer_id).filter(
        Package.id == package_id).first()
    if not package:
        raise NotFoundOrForbidden(message)
    return package


def registry_items(db: Session, caterer_id: int):
    """Query over a caterer's package items: drafts and items of curated packages"""
    return db.query(PackageItem).filter(
        PackageItem.caterer_id == caterer_id,
        or_(
            PackageItem.package_id.is_(None),
            PackageItem.package.has(
                Package.created_by == PackageCreator.CATERER),
        ),
    )


def get_owned_dish(
    db: Session,
    dish_id: int,
    caterer_id: int,
    message: str = "Dish not found or does not belong to this caterer",
) -> Dish:
    dish = db.query(Dish).filter(
        Dish.id == dish_id,
        Dish.caterer_id == caterer_id,
    ).first()
    if not dish:
        raise NotFoundOrForbidden(message)
    return dish


def caterer_minimum_guests(db: Session, caterer_id: int) -> Optional[int]:
    info = db.query(CatererInfo).filter(
        CatererInfo.caterer_id == caterer_id).first()
    return info.minimum_guests if info and info.minimum_guests else None


def resolve_minimum_people(db: Session, caterer_id: int, requested: Optional[int]) -> int:
    """Caller value if given, else the caterer's configured minimum-guest floor"""
    if requested is not None:
        return requested

    minimum_guests = caterer_minimum_guests(db, caterer_id)
    if minimum_guests is None:
        raise ConfigurationError(
            "Minimum guests is not configured for this caterer. "
            "Set it in your caterer profile or pass minimum_people."
        )
    return minimum_guests


def get_owned_dishes(db: Session, dish_ids: List[int], caterer_id: int) -> List[Dish]:
    """Dishes in the given order. All of them must belong to the caterer."""
    ids = list(dict.fromkeys(dish_ids))
    if not ids:
        return []
    dishes = db.query(Dish).filter(
        Dish.id.in_(ids),
        Dish.caterer_id == caterer_id,
    ).all()
    if len(dishes) != len(ids):
        raise NotFoundOrForbidden(
            "Some dishes not found or do not belong to this caterer")
    by_id = {dish.id: dish for dish in dishes}
    return [by_id[dish_id] for dish_id in ids]


def get_occasions(db: Session, occasion_ids: List[int]) -> List[Occasion]:
    ids = list(dict.fromkeys(occasion_ids or []))
    if not ids:
        return []
    occasions = db.query(Occasion).filter(Occasion.id.in_(ids)).all()
    if len(occasions) != len(ids):
        raise ValidationError("One or more occasions not found")
    return occasions
