"""
Package pricing.

    total = sum(effective_unit_price(item) * guest_count * item.quantity)

where the effective unit price is the item's price snapshot (price_at_time)
or, when the snapshot is missing, the dish's current price. All amounts are
Decimal, rounded to cents.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ..models.package_item import PackageItem

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    """Coerce numbers coming from the db or a request body to Decimal"""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() avoids carrying binary float noise into the Decimal
    return Decimal(str(value))


def quantize(value: Decimal) -> Decimal:
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def effective_unit_price(item: PackageItem) -> Decimal:
    if item.price_at_time is not None:
        return to_decimal(item.price_at_time)
    return to_decimal(item.dish.price)


def calculate_items_total(items: Iterable[PackageItem], guest_count: int) -> Decimal:
    """Price a set of items for guest_count people. No items prices to 0."""
    total = ZERO
    for item in items:
        quantity = item.quantity if item.quantity is not None else 1
        total += effective_unit_price(item) * guest_count * quantity
    return quantize(total)


def calculate_package_price(db: Session, package_id: int, guest_count: int) -> Decimal:
    """Price the items currently linked to a package"""
    # sessions are created with autoflush off
    db.flush()
    items = db.query(PackageItem).filter(
        PackageItem.package_id == package_id
    ).all()
    return calculate_items_total(items, guest_count)


def price_per_person(total_price, minimum_people: Optional[int]) -> Decimal:
    if not minimum_people:
        return ZERO
    return quantize(to_decimal(total_price) / minimum_people)
