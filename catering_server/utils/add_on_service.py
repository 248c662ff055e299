"""
Add-ons: priced supplements of a FIXED package, managed by the package's caterer.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import NotFoundOrForbidden, ValidationError
from ..models.add_on import AddOn
from ..models.package import Package, PackageCreator
from .lookups import get_caterer, get_owned_package
from .pricing import to_decimal

logger = logging.getLogger(__name__)

ADD_ON_NOT_FOUND = "Add-on not found or does not belong to this caterer"


def whole_price(value) -> int:
    """Non-negative whole currency units, fractions rounded half up"""
    price = to_decimal(value)
    if price < 0:
        raise ValidationError("Add-on price must be a non-negative number")
    return int(price.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class AddOnService:

    @staticmethod
    def create(db: Session, caterer_id: int, package_id: int, data) -> AddOn:
        get_caterer(db, caterer_id)
        package = get_owned_package(db, package_id, caterer_id)

        # checked only here, a later change of customisation_type keeps existing add-ons
        if not package.is_fixed():
            raise ValidationError(
                "Add-ons can only be added to FIXED menu packages")

        add_on = AddOn(
            package_id=package.id,
            name=data.name,
            description=data.description,
            price=whole_price(data.price),
            currency=data.currency or package.currency or settings.DEFAULT_CURRENCY,
            is_active=True if data.is_active is None else data.is_active,
        )
        db.add(add_on)
        db.commit()
        db.refresh(add_on)
        logger.info(f"Add-on {add_on.id} created on package {package.id}")
        return add_on

    @staticmethod
    def list_for_package(db: Session, caterer_id: int, package_id: int) -> List[AddOn]:
        package = get_owned_package(db, package_id, caterer_id)
        return db.query(AddOn).filter(
            AddOn.package_id == package.id
        ).order_by(AddOn.created_at.asc(), AddOn.id.asc()).all()

    @staticmethod
    def get(db: Session, caterer_id: int, package_id: int, add_on_id: int) -> AddOn:
        get_owned_package(db, package_id, caterer_id)
        add_on = db.query(AddOn).join(Package).filter(
            AddOn.id == add_on_id,
            AddOn.package_id == package_id,
            Package.caterer_id == caterer_id,
            Package.created_by == PackageCreator.CATERER,
        ).first()
        if not add_on:
            raise NotFoundOrForbidden(ADD_ON_NOT_FOUND)
        return add_on

    @staticmethod
    def update(db: Session, caterer_id: int, package_id: int, add_on_id: int, data) -> AddOn:
        add_on = AddOnService.get(db, caterer_id, package_id, add_on_id)

        update_data = data.model_dump(exclude_unset=True)
        if "price" in update_data:
            if update_data["price"] is None:
                raise ValidationError("Add-on price cannot be empty")
            update_data["price"] = whole_price(update_data["price"])
        for field in ("name", "currency", "is_active"):
            if field in update_data and update_data[field] is None:
                del update_data[field]

        for field, value in update_data.items():
            setattr(add_on, field, value)

        db.commit()
        db.refresh(add_on)
        return add_on

    @staticmethod
    def delete(db: Session, caterer_id: int, package_id: int, add_on_id: int) -> None:
        add_on = AddOnService.get(db, caterer_id, package_id, add_on_id)
        db.delete(add_on)
        db.commit()
        logger.info(f"Add-on {add_on_id} deleted from package {package_id}")
