"""
Package aggregate service: creates, updates and deletes caterer packages.

Resolves item references, links and unlinks package items, reprices,
validates category selections against the customisation type and stores
occasion links. Every public method runs as a single transaction.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import ValidationError
from ..models.package import CustomisationType, Package, PackageCreator
from ..models.package_item import PackageItem
from .category_selection import (replace_category_selections,
                                 validate_category_selections)
from .lookups import (caterer_minimum_guests, caterer_packages, get_caterer,
                      get_occasions, get_owned_dishes, get_owned_package,
                      resolve_minimum_people)
from .package_item_service import (PackageItemService, new_item_from_dish,
                                   reprice_package)
from .pricing import quantize
from .transaction import write_transaction

logger = logging.getLogger(__name__)

CORE_FIELDS = ("name", "cover_image_url", "currency", "rating",
               "is_active", "is_available", "customisation_type")


def _materialize_dish_items(db: Session, package: Package, dish_ids: List[int], caterer_id: int) -> List[int]:
    """Create one draft item per raw dish id and return the new item ids"""
    dishes = get_owned_dishes(db, dish_ids, caterer_id)
    items = [new_item_from_dish(dish, package.minimum_people)
             for dish in dishes]
    db.add_all(items)
    db.flush()
    return [item.id for item in items]


def _linked_item_ids(db: Session, package: Package) -> List[int]:
    db.flush()
    return [
        row[0]
        for row in db.query(PackageItem.id).filter(
            PackageItem.package_id == package.id
        ).order_by(PackageItem.id).all()
    ]


class PackageService:

    @staticmethod
    def list_for_caterer(db: Session, caterer_id: int) -> List[Package]:
        get_caterer(db, caterer_id)
        return caterer_packages(db, caterer_id).order_by(
            Package.created_at.desc(), Package.id.desc()).all()

    @staticmethod
    def get(db: Session, package_id: int, caterer_id: int) -> Package:
        return get_owned_package(
            db, package_id, caterer_id,
            "Package not found or you don't have permission to access it")

    @staticmethod
    def create(db: Session, caterer_id: int, data) -> Package:
        get_caterer(db, caterer_id)

        minimum_people = resolve_minimum_people(
            db, caterer_id, data.minimum_people)
        customisation_type = data.customisation_type or CustomisationType.FIXED
        validate_category_selections(
            db, data.category_selections, customisation_type)
        occasions = get_occasions(db, data.occasion_ids)

        with write_transaction(db):
            package = Package(
                name=data.name,
                caterer_id=caterer_id,
                created_by=PackageCreator.CATERER,
                cover_image_url=data.cover_image_url,
                minimum_people=minimum_people,
                total_price=0,
                currency=data.currency or settings.DEFAULT_CURRENCY,
                customisation_type=customisation_type,
                rating=data.rating,
                is_active=True if data.is_active is None else data.is_active,
                is_available=True if data.is_available is None else data.is_available,
            )
            db.add(package)
            db.flush()

            item_ids = list(data.package_item_ids or [])
            if data.dish_ids:
                item_ids += _materialize_dish_items(
                    db, package, data.dish_ids, caterer_id)

            if item_ids:
                PackageItemService.link(db, package, item_ids, caterer_id)
                reprice_package(db, package)
            elif data.total_price is not None:
                # nothing to derive a price from, keep the caterer's figure
                package.total_price = quantize(data.total_price)
                package.is_custom_price = True

            if customisation_type == CustomisationType.FIXED:
                replace_category_selections(
                    db, package, data.category_selections or [])
            package.occasions = occasions

        db.refresh(package)
        logger.info(
            f"Package {package.id} created by caterer {caterer_id}: "
            f"{len(package.items)} item(s), total {package.total_price}")
        return package

    @staticmethod
    def update(db: Session, package_id: int, caterer_id: int, data) -> Package:
        package = get_owned_package(
            db, package_id, caterer_id,
            "Package not found or you don't have permission to update it")
        fields = data.model_fields_set

        customisation_type = data.customisation_type or package.customisation_type
        if "category_selections" in fields:
            validate_category_selections(
                db, data.category_selections, customisation_type)
        elif customisation_type != CustomisationType.FIXED and package.category_selections:
            raise ValidationError(
                "Category selections are only allowed for FIXED packages, "
                "send an empty category_selections list to remove them")

        occasions = None
        if "occasion_ids" in fields:
            occasions = get_occasions(db, data.occasion_ids)

        # minimum_people follows the caterer's floor unless pinned in this call
        previous_minimum = package.minimum_people
        if data.minimum_people is not None:
            minimum_people = data.minimum_people
        elif data.reprice_from_caterer_defaults:
            minimum_people = caterer_minimum_guests(
                db, caterer_id) or previous_minimum
        else:
            minimum_people = previous_minimum

        items_touched = (data.package_item_ids is not None
                         or bool(data.dish_ids))

        with write_transaction(db):
            for field in CORE_FIELDS:
                value = getattr(data, field)
                if field in fields and value is not None:
                    setattr(package, field, value)
            package.minimum_people = minimum_people

            if items_touched:
                current_ids = _linked_item_ids(db, package)
                wanted_ids = (list(data.package_item_ids)
                              if data.package_item_ids is not None else list(current_ids))
                to_add = [item_id for item_id in dict.fromkeys(wanted_ids)
                          if item_id not in current_ids]
                to_remove = [item_id for item_id in current_ids
                             if item_id not in wanted_ids]

                PackageItemService.link(db, package, to_add, caterer_id)
                PackageItemService.unlink(db, package, to_remove)
                if data.dish_ids:
                    new_ids = _materialize_dish_items(
                        db, package, data.dish_ids, caterer_id)
                    PackageItemService.link(db, package, new_ids, caterer_id)
                logger.info(
                    f"Package {package.id}: linked {len(to_add)}, "
                    f"unlinked {len(to_remove)} item(s)")

            if items_touched or minimum_people != previous_minimum:
                reprice_package(db, package)
            elif data.total_price is not None:
                package.total_price = quantize(data.total_price)
                package.is_custom_price = True

            if "category_selections" in fields:
                replace_category_selections(
                    db, package, data.category_selections or [])

            if occasions is not None:
                package.occasions = occasions

        db.refresh(package)
        return package

    @staticmethod
    def link_items(db: Session, package_id: int, item_ids: List[int], caterer_id: int) -> Package:
        """Bulk-link items and reprice. Linking already linked items changes nothing."""
        package = get_owned_package(db, package_id, caterer_id)
        with write_transaction(db):
            PackageItemService.link(db, package, item_ids, caterer_id)
            reprice_package(db, package)
        db.refresh(package)
        return package

    @staticmethod
    def delete(db: Session, package_id: int, caterer_id: int) -> None:
        """Delete a package. Its items become drafts, selections and add-ons go with it."""
        package = get_owned_package(
            db, package_id, caterer_id,
            "Package not found or you do not have permission to delete it")
        with write_transaction(db):
            for item in package.items:
                item.detach()
            db.flush()
            db.delete(package)
        logger.info(f"Package {package_id} deleted by caterer {caterer_id}")
