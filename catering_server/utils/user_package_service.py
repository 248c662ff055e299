"""
Buyer side of packages: composing a package from a caterer's dishes and
reading packages. Buyer-authored packages are re-derived at read time so a
later dish price change shows up; caterer packages use the stored price.
"""
import logging
from typing import Dict, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..exceptions import NotFoundOrForbidden, ValidationError
from ..models.dish import Dish
from ..models.package import CustomisationType, Package, PackageCreator
from ..models.user import CatererInfo, CatererStatus, User, UserType
from .formatters import format_package
from .lookups import get_occasions, resolve_minimum_people
from .package_item_service import new_item_from_dish
from .pricing import calculate_items_total, quantize, to_decimal
from .transaction import write_transaction

logger = logging.getLogger(__name__)

PACKAGE_NOT_AVAILABLE = "Package not found or not available"


def _approved_caterer(db: Session, caterer_id: int) -> User:
    caterer = db.query(User).join(CatererInfo).filter(
        User.id == caterer_id,
        User.type == UserType.CATERER,
        CatererInfo.status == CatererStatus.APPROVED,
    ).first()
    if not caterer:
        raise NotFoundOrForbidden("Caterer not found or not approved")
    return caterer


def _current_price(db: Session, package: Package):
    """Stored price, except for buyer packages without a pinned price"""
    if package.created_by != PackageCreator.USER or package.is_custom_price:
        return to_decimal(package.total_price)

    fresh = calculate_items_total(package.items, package.minimum_people)
    if fresh != quantize(package.total_price):
        logger.info(
            f"Buyer package {package.id} repriced from {package.total_price} to {fresh}")
        with write_transaction(db):
            package.total_price = fresh
        db.refresh(package)
    return fresh


class UserPackageService:

    @staticmethod
    def create(db: Session, user_id: int, data) -> Package:
        """Buyer-authored package: always CUSTOMISABLE, priced once here"""
        user = db.query(User).filter(User.id == user_id).first()
        if not user or user.type != UserType.USER:
            raise ValidationError("Only buyers can compose their own packages")

        caterer = _approved_caterer(db, data.caterer_id)
        minimum_people = resolve_minimum_people(
            db, caterer.id, data.minimum_people)

        dish_ids = list(dict.fromkeys(data.dish_ids))
        dishes = db.query(Dish).filter(
            Dish.id.in_(dish_ids),
            Dish.caterer_id == caterer.id,
            Dish.is_active.is_(True),
        ).all()
        if len(dishes) != len(dish_ids):
            raise NotFoundOrForbidden(
                "Some dishes not found or not offered by this caterer")
        occasions = get_occasions(db, data.occasion_ids)

        # no snapshot: the live dish price is what read-time repricing follows
        items = [new_item_from_dish(dish, minimum_people, snapshot_price=False)
                 for dish in dishes]
        with write_transaction(db):
            package = Package(
                name=data.name or f"Custom package from {caterer.first_name}",
                caterer_id=caterer.id,
                user_id=user.id,
                created_by=PackageCreator.USER,
                minimum_people=minimum_people,
                total_price=calculate_items_total(items, minimum_people),
                currency=dishes[0].currency,
                customisation_type=CustomisationType.CUSTOMISABLE,
            )
            db.add(package)
            db.add_all(items)
            db.flush()
            for item in items:
                item.attach(package.id)
            package.occasions = occasions

        db.refresh(package)
        logger.info(
            f"Buyer {user.id} composed package {package.id} "
            f"({len(items)} dishes, total {package.total_price})")
        return package

    @staticmethod
    def get(db: Session, package_id: int, user_id=None) -> Dict:
        """Active, available package of an approved caterer, or the buyer's own package"""
        visible = [Package.created_by == PackageCreator.CATERER]
        if user_id is not None:
            visible.append(Package.user_id == user_id)

        package = db.query(Package).join(
            CatererInfo, CatererInfo.caterer_id == Package.caterer_id
        ).filter(
            Package.id == package_id,
            Package.is_active.is_(True),
            Package.is_available.is_(True),
            CatererInfo.status == CatererStatus.APPROVED,
            or_(*visible),
        ).first()
        if not package:
            raise NotFoundOrForbidden(PACKAGE_NOT_AVAILABLE)

        total = _current_price(db, package)
        return format_package(package, total_price=total, active_add_ons_only=True)

    @staticmethod
    def list_for_caterer(db: Session, caterer_id: int) -> List[Dict]:
        _approved_caterer(db, caterer_id)
        packages = db.query(Package).filter(
            Package.caterer_id == caterer_id,
            Package.created_by == PackageCreator.CATERER,
            Package.is_active.is_(True),
            Package.is_available.is_(True),
        ).order_by(Package.created_at.desc(), Package.id.desc()).all()
        return [format_package(package, active_add_ons_only=True)
                for package in packages]

    @staticmethod
    def list_for_user(db: Session, user_id: int) -> List[Dict]:
        packages = db.query(Package).filter(
            Package.user_id == user_id,
            Package.created_by == PackageCreator.USER,
        ).order_by(Package.created_at.desc(), Package.id.desc()).all()
        return [format_package(package, total_price=_current_price(db, package))
                for package in packages]
