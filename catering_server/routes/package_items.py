"""
Package item registry routes: draft and linked items of the current caterer.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth_utils import caterer_required
from ..db import get_db
from ..models.user import User
from ..schemas.package_item import PackageItemCreate, PackageItemUpdate
from ..utils.formatters import format_package_item
from ..utils.package_item_service import PackageItemService

router = APIRouter(prefix="/caterer/packages/items",
                   tags=["Caterer Package Items"])


@router.post("", status_code=201)
def create_package_item(
    request: PackageItemCreate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    """Create a package item. Without package_id it is stored as a draft."""
    item = PackageItemService.create(db, current.id, request)
    return format_package_item(item, package=item.package, include_package=True)


@router.get("")
def list_package_items(
    draft: bool = Query(False, description="Only items not linked to a package"),
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return PackageItemService.list_grouped(db, current.id, draft_only=draft)


@router.get("/{item_id}")
def get_package_item(
    item_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    item = PackageItemService.get(db, item_id, current.id)
    return format_package_item(item, package=item.package, include_package=True)


@router.put("/{item_id}")
def update_package_item(
    item_id: int,
    request: PackageItemUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    item = PackageItemService.update(db, item_id, current.id, request)
    return format_package_item(item, package=item.package, include_package=True)


@router.delete("/{item_id}")
def delete_package_item(
    item_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    PackageItemService.delete(db, item_id, current.id)
    return {"message": "Package item deleted successfully", "id": item_id}
