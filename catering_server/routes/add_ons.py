"""
Add-on routes, scoped to one package of the current caterer.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth_utils import caterer_required
from ..db import get_db
from ..models.user import User
from ..schemas.add_on import AddOnCreate, AddOnUpdate
from ..utils.add_on_service import AddOnService
from ..utils.formatters import format_add_on

router = APIRouter(prefix="/caterer/packages/{package_id}/add-ons",
                   tags=["Caterer Add-ons"])


@router.post("", status_code=201)
def create_add_on(
    package_id: int,
    request: AddOnCreate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_add_on(AddOnService.create(db, current.id, package_id, request))


@router.get("")
def list_add_ons(
    package_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return [format_add_on(add_on)
            for add_on in AddOnService.list_for_package(db, current.id, package_id)]


@router.get("/{add_on_id}")
def get_add_on(
    package_id: int,
    add_on_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_add_on(AddOnService.get(db, current.id, package_id, add_on_id))


@router.put("/{add_on_id}")
def update_add_on(
    package_id: int,
    add_on_id: int,
    request: AddOnUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    return format_add_on(
        AddOnService.update(db, current.id, package_id, add_on_id, request))


@router.delete("/{add_on_id}")
def delete_add_on(
    package_id: int,
    add_on_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(caterer_required)
):
    AddOnService.delete(db, current.id, package_id, add_on_id)
    return {"success": True}
