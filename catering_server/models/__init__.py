# Import models in dependency order to avoid relationship resolution issues

# Base models first (no foreign key dependencies)
from .user import User, UserType, CatererInfo, CatererStatus
from .category import Category, SubCategory, CuisineType

# Package side (package_occasions table is needed by Occasion)
from .package import (Package, PackageCategorySelection, CustomisationType,
                      PackageCreator, package_occasions)
from .occasion import Occasion

# Models that depend on dishes and packages
from .dish import Dish
from .package_item import PackageItem, Unattached, AttachedTo
from .add_on import AddOn

# Export all models
__all__ = [
    "User",
    "UserType",
    "CatererInfo",
    "CatererStatus",
    "Category",
    "SubCategory",
    "CuisineType",
    "Package",
    "PackageCategorySelection",
    "CustomisationType",
    "PackageCreator",
    "package_occasions",
    "Occasion",
    "Dish",
    "PackageItem",
    "Unattached",
    "AttachedTo",
    "AddOn",
]
