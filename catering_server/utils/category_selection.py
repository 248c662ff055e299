"""
Category selection rules: how many dishes a buyer picks from a category of a FIXED package.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import ValidationError
from ..models.category import Category
from ..models.package import CustomisationType, Package, PackageCategorySelection

logger = logging.getLogger(__name__)


def validate_category_selections(
    db: Session,
    selections: Optional[List],
    customisation_type: CustomisationType,
) -> None:
    """Reject selections on non-FIXED packages, duplicates and unknown categories"""
    if not selections:
        return

    if customisation_type != CustomisationType.FIXED:
        raise ValidationError(
            "Category selections are only allowed for FIXED packages")

    category_ids = [selection.category_id for selection in selections]
    if len(set(category_ids)) != len(category_ids):
        raise ValidationError(
            "Each category can only appear once in category selections")

    found = db.query(Category.id).filter(
        Category.id.in_(category_ids)).count()
    if found != len(category_ids):
        raise ValidationError("One or more categories not found")


def replace_category_selections(
    db: Session,
    package: Package,
    selections: List,
) -> None:
    """Delete-then-recreate the package's selections. Only FIXED packages keep any."""
    package.category_selections.clear()
    db.flush()

    if not selections or not package.is_fixed():
        return

    for selection in selections:
        package.category_selections.append(PackageCategorySelection(
            category_id=selection.category_id,
            num_dishes_to_select=selection.num_dishes_to_select,
        ))
    logger.info(
        f"Package {package.id}: {len(selections)} category selection(s) stored")
