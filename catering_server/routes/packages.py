"""
Caterer package routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth_utils import caterer_required
from ..db import get_db
from ..models.user import User
from ..schemas.package import PackageCreate, PackageUpdate
from ..schemas.package_item import LinkItemsRequest
from ..utils.formatters import format_package
from ..utils.package_service import PackageService

router = APIRouter(prefix="/caterer/packages", tags=["Caterer Packages"])


@router.get("")
def list_packages(
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return [format_package(package)
            for package in PackageService.list_for_caterer(db, current.id)]


@router.post("", status_code=201)
def create_package(
    request: PackageCreate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    """
    Create a package from existing package items (package_item_ids) and/or
    raw dishes (dish_ids). The total price is derived from the items.
    """
    package = PackageService.create(db, current.id, request)
    return format_package(package)


@router.get("/{package_id}")
def get_package(
    package_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_package(PackageService.get(db, package_id, current.id))


@router.put("/{package_id}")
def update_package(
    package_id: int,
    request: PackageUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    package = PackageService.update(db, package_id, current.id, request)
    return format_package(package)


@router.delete("/{package_id}")
def delete_package(
    package_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    PackageService.delete(db, package_id, current.id)
    return {"message": "Package deleted successfully", "id": package_id}


@router.post("/{package_id}/items/link")
def link_package_items(
    package_id: int,
    request: LinkItemsRequest,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    package = PackageService.link_items(
        db, package_id, request.item_ids, current.id)
    return format_package(package)
