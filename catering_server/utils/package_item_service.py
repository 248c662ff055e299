"""
Package item registry: draft and linked package items owned by a caterer.
"""
import logging
from datetime import datetime
from typing import Dict, List, Optional, Set

from sqlalchemy.orm import Session

from ..exceptions import NotFoundOrForbidden
from ..models.category import Category
from ..models.dish import Dish
from ..models.package import Package
from ..models.package_item import PackageItem
from .formatters import format_category, format_package_item
from .lookups import (get_caterer, get_owned_dish, get_owned_package,
                      registry_items)
from .pricing import calculate_package_price
from .transaction import write_transaction

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Package item not found or you don't have permission to access it"
ITEMS_NOT_FOUND = "Some package items not found or do not belong to this caterer"


def reprice_package(db: Session, package: Package) -> None:
    """Recompute total_price from the currently linked items and minimum_people"""
    package.total_price = calculate_package_price(
        db, package.id, package.minimum_people)
    package.is_custom_price = False
    # always write the row so the revision check runs
    package.updated_at = datetime.utcnow()


def reprice_packages(db: Session, package_ids: Set[Optional[int]]) -> None:
    ids = [package_id for package_id in package_ids if package_id is not None]
    if not ids:
        return
    for package in db.query(Package).filter(Package.id.in_(ids)).all():
        reprice_package(db, package)


def new_item_from_dish(dish: Dish, people_count: int, snapshot_price: bool = True) -> PackageItem:
    """Draft item built from a raw dish pick: quantity from pieces, dish price snapshot"""
    return PackageItem(
        dish_id=dish.id,
        dish=dish,
        caterer_id=dish.caterer_id,
        people_count=people_count,
        quantity=dish.pieces or 1,
        price_at_time=dish.price if snapshot_price else None,
        is_optional=False,
        is_addon=False,
    )


class PackageItemService:
    """Create, list, update, delete and link package items"""

    @staticmethod
    def create(db: Session, caterer_id: int, data) -> PackageItem:
        get_caterer(db, caterer_id)
        dish = get_owned_dish(db, data.dish_id, caterer_id)

        package = None
        if data.package_id is not None:
            package = get_owned_package(db, data.package_id, caterer_id)

        item = PackageItem(
            dish_id=dish.id,
            caterer_id=caterer_id,
            people_count=data.people_count,
            quantity=data.quantity if data.quantity is not None else 1,
            price_at_time=data.price_at_time if data.price_at_time is not None else dish.price,
            is_optional=bool(data.is_optional),
            is_addon=bool(data.is_addon),
            package_id=package.id if package else None,
        )
        with write_transaction(db):
            db.add(item)
            db.flush()
            if package is not None:
                reprice_package(db, package)

        db.refresh(item)
        logger.info(
            f"Package item {item.id} created for caterer {caterer_id} "
            f"({'linked to package ' + str(item.package_id) if package else 'draft'})")
        return item

    @staticmethod
    def list_grouped(db: Session, caterer_id: int, draft_only: bool = False) -> Dict:
        """All of the caterer's items grouped by their dish category, empty categories included"""
        get_caterer(db, caterer_id)

        categories = db.query(Category).order_by(Category.name).all()

        query = registry_items(db, caterer_id)
        if draft_only:
            query = query.filter(PackageItem.package_id.is_(None))
        items = query.order_by(PackageItem.created_at.desc(),
                               PackageItem.id.desc()).all()

        # re-verify every linked package against the caterer
        package_ids = {item.package_id for item in items if item.package_id}
        owned_packages = {}
        if package_ids:
            owned_packages = {
                package.id: package
                for package in db.query(Package).filter(
                    Package.id.in_(package_ids),
                    Package.caterer_id == caterer_id,
                ).all()
            }

        by_category: Dict[int, List] = {}
        uncategorized = []
        for item in items:
            package = owned_packages.get(item.package_id)
            if item.package_id and package is None:
                logger.warning(
                    f"Item {item.id} points at package {item.package_id} "
                    f"which does not belong to caterer {caterer_id}")
            formatted = format_package_item(
                item, package=package, include_package=True)
            category_id = item.dish.category_id if item.dish else None
            if category_id:
                by_category.setdefault(category_id, []).append(formatted)
            else:
                uncategorized.append(formatted)

        result = [
            {
                "category": format_category(category),
                "items": by_category.get(category.id, []),
            }
            for category in categories
        ]
        if uncategorized:
            result.append({
                "category": {
                    "id": None,
                    "name": "Uncategorized",
                    "description": "Items without a valid category",
                },
                "items": uncategorized,
            })

        return {"categories": result}

    @staticmethod
    def get(db: Session, item_id: int, caterer_id: int) -> PackageItem:
        item = registry_items(db, caterer_id).filter(
            PackageItem.id == item_id).first()
        if not item:
            raise NotFoundOrForbidden(ITEM_NOT_FOUND)
        return item

    @staticmethod
    def update(db: Session, item_id: int, caterer_id: int, data) -> PackageItem:
        item = PackageItemService.get(db, item_id, caterer_id)
        fields = data.model_fields_set

        if "dish_id" in fields and data.dish_id is not None:
            get_owned_dish(db, data.dish_id, caterer_id)

        if "package_id" in fields and data.package_id is not None:
            get_owned_package(db, data.package_id, caterer_id)

        touched = {item.package_id}
        with write_transaction(db):
            for field in ("dish_id", "people_count", "quantity",
                          "is_optional", "is_addon"):
                value = getattr(data, field)
                if field in fields and value is not None:
                    setattr(item, field, value)
            if "price_at_time" in fields:
                # null clears the snapshot, pricing then follows the dish
                item.price_at_time = data.price_at_time
            if "package_id" in fields:
                if data.package_id is None:
                    item.detach()
                else:
                    item.attach(data.package_id)
            touched.add(item.package_id)

            db.flush()
            db.expire(item, ["dish"])
            reprice_packages(db, touched)

        db.refresh(item)
        return item

    @staticmethod
    def delete(db: Session, item_id: int, caterer_id: int) -> None:
        item = PackageItemService.get(db, item_id, caterer_id)
        package_id = item.package_id
        with write_transaction(db):
            db.delete(item)
            db.flush()
            reprice_packages(db, {package_id})
        logger.info(f"Package item {item_id} deleted by caterer {caterer_id}")

    @staticmethod
    def link(db: Session, package: Package, item_ids: List[int], caterer_id: int) -> List[PackageItem]:
        """
        Attach items to a package. Does not commit.

        Fails as a whole when any id is missing or owned by another caterer.
        Packages the items are moved away from are repriced, the target
        package is left for the caller to reprice.
        """
        ids = list(dict.fromkeys(item_ids))
        if not ids:
            return []

        items = registry_items(db, caterer_id).filter(
            PackageItem.id.in_(ids)).all()
        if len(items) != len(ids):
            raise NotFoundOrForbidden(ITEMS_NOT_FOUND)

        previous = {item.package_id for item in items} - {package.id}
        for item in items:
            item.attach(package.id)
            # repair items written before caterer_id was denormalized
            item.caterer_id = caterer_id
        db.flush()
        reprice_packages(db, previous)
        return items

    @staticmethod
    def unlink(db: Session, package: Package, item_ids: List[int]) -> None:
        """Demote items back to drafts. Does not commit."""
        if not item_ids:
            return
        items = db.query(PackageItem).filter(
            PackageItem.id.in_(item_ids),
            PackageItem.package_id == package.id,
        ).all()
        for item in items:
            item.detach()
        db.flush()
