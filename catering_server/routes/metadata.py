"""
Public catalog metadata: categories, cuisine types and occasions.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.category import Category, CuisineType
from ..models.occasion import Occasion

router = APIRouter(prefix="/metadata", tags=["Metadata"])


@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    categories = db.query(Category).order_by(Category.name).all()
    return [
        {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "sub_categories": [
                {"id": sub.id, "name": sub.name, "description": sub.description}
                for sub in category.sub_categories
            ],
        }
        for category in categories
    ]


@router.get("/cuisine-types")
def list_cuisine_types(db: Session = Depends(get_db)):
    cuisine_types = db.query(CuisineType).order_by(CuisineType.name).all()
    return [{"id": c.id, "name": c.name, "description": c.description}
            for c in cuisine_types]


@router.get("/occasions")
def list_occasions(db: Session = Depends(get_db)):
    occasions = db.query(Occasion).order_by(Occasion.name).all()
    return [
        {
            "id": occasion.id,
            "name": occasion.name,
            "description": occasion.description,
            "image_url": occasion.image_url,
        }
        for occasion in occasions
    ]
