"""
Buyer-facing package routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth_utils import buyer_required, get_optional_user
from ..db import get_db
from ..models.user import User
from ..schemas.user_package import UserPackageCreate
from ..utils.formatters import format_package
from ..utils.user_package_service import UserPackageService

router = APIRouter(prefix="/user", tags=["User Packages"])


@router.post("/packages", status_code=201)
def create_custom_package(
    request: UserPackageCreate,
    db: Session = Depends(get_db),
    current: User = Depends(buyer_required)
):
    """Compose a package from a caterer's dishes"""
    package = UserPackageService.create(db, current.id, request)
    return format_package(package)


@router.get("/packages/mine")
def list_my_packages(
    db: Session = Depends(get_db),
    current: User = Depends(buyer_required)
):
    return UserPackageService.list_for_user(db, current.id)


@router.get("/packages/{package_id}")
def get_package(
    package_id: int,
    db: Session = Depends(get_db),
    current: Optional[User] = Depends(get_optional_user)
):
    return UserPackageService.get(
        db, package_id, user_id=current.id if current else None)


@router.get("/caterers/{caterer_id}/packages")
def list_caterer_packages(caterer_id: int, db: Session = Depends(get_db)):
    return UserPackageService.list_for_caterer(db, caterer_id)
