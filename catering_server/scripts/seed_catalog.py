"""
Populate the shared catalog metadata: categories with their sub categories,
cuisine types and occasions.

Run once after migrations:
    python -m catering_server.scripts.seed_catalog
Existing rows (matched by name) are left untouched.
"""
from sqlalchemy.orm import Session

from ..db import engine
from ..models.category import Category, CuisineType, SubCategory
from ..models.occasion import Occasion

DEFAULT_CATEGORIES = {
    "Starters": ["Cold Mezze", "Hot Mezze", "Salads", "Soups"],
    "Main Course": ["Grills", "Rice Dishes", "Curries", "Pasta"],
    "Desserts": ["Arabic Sweets", "Cakes", "Fruit"],
    "Beverages": ["Juices", "Hot Drinks", "Soft Drinks"],
    "Bread & Bakery": ["Bread", "Pastries"],
}

DEFAULT_CUISINE_TYPES = [
    "Arabic", "Lebanese", "Indian", "Italian", "Asian",
    "Continental", "Mexican", "International",
]

DEFAULT_OCCASIONS = [
    ("Wedding", "Weddings and engagement parties"),
    ("Birthday", "Birthday celebrations"),
    ("Corporate", "Corporate events, meetings and conferences"),
    ("Family Gathering", "Family lunches and dinners"),
    ("Ramadan", "Iftar and suhoor gatherings"),
    ("Graduation", "Graduation parties"),
]


def seed_categories(db: Session) -> int:
    created = 0
    for name, sub_names in DEFAULT_CATEGORIES.items():
        category = db.query(Category).filter(Category.name == name).first()
        if not category:
            category = Category(name=name)
            db.add(category)
            db.flush()
            created += 1
        existing = {sub.name for sub in category.sub_categories}
        for sub_name in sub_names:
            if sub_name not in existing:
                db.add(SubCategory(name=sub_name, category_id=category.id))
    return created


def seed_cuisine_types(db: Session) -> int:
    existing = {row[0] for row in db.query(CuisineType.name).all()}
    missing = [name for name in DEFAULT_CUISINE_TYPES if name not in existing]
    db.add_all(CuisineType(name=name) for name in missing)
    return len(missing)


def seed_occasions(db: Session) -> int:
    existing = {row[0] for row in db.query(Occasion.name).all()}
    missing = [(name, description) for name, description in DEFAULT_OCCASIONS
               if name not in existing]
    db.add_all(Occasion(name=name, description=description)
               for name, description in missing)
    return len(missing)


def seed_catalog(db: Session) -> dict:
    counts = {
        "categories": seed_categories(db),
        "cuisine_types": seed_cuisine_types(db),
        "occasions": seed_occasions(db),
    }
    db.commit()
    return counts


if __name__ == "__main__":
    db = Session(bind=engine)
    try:
        counts = seed_catalog(db)
        print(f"✅ Catalog seeded: {counts}")
    except Exception as e:
        print(f"❌ Error seeding catalog: {e}")
        db.rollback()
        raise
    finally:
        db.close()
