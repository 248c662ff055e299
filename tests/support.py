"""
Shared fixtures for the API tests: a fresh schema per test and a small catalog.
"""
import os
import unittest

os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient  # noqa: E402

from catering_server.auth_utils import token_for  # noqa: E402
from catering_server.db import Base, SessionLocal, engine  # noqa: E402
from catering_server.main import app  # noqa: E402
from catering_server.models import (  # noqa: E402
    Category, CatererInfo, CatererStatus, CuisineType, Dish, Occasion,
    SubCategory, User, UserType)


class ApiTestCase(unittest.TestCase):
    """
    Seeds two approved caterers (one with a 20 guest minimum, one without),
    a pending caterer, two buyers and a few dishes.
    """

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = SessionLocal()
        self._seed()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def _user(self, email, user_type, business=None, minimum_guests=None,
              status=CatererStatus.APPROVED):
        user = User(email=email, first_name=email.split("@")[0], type=user_type)
        if business:
            user.caterer_info = CatererInfo(
                business_name=business, minimum_guests=minimum_guests,
                status=status)
        self.db.add(user)
        self.db.flush()
        return user

    def _seed(self):
        db = self.db
        self.main_course = Category(name="Main Course")
        self.desserts = Category(name="Desserts")
        db.add_all([self.main_course, self.desserts])
        db.flush()
        db.add(SubCategory(name="Rice Dishes", category_id=self.main_course.id))
        arabic = CuisineType(name="Arabic")
        db.add(arabic)
        self.wedding = Occasion(name="Wedding")
        self.birthday = Occasion(name="Birthday")
        db.add_all([self.wedding, self.birthday])

        caterer = self._user("caterer@example.com", UserType.CATERER,
                             "Golden Spoon", minimum_guests=20)
        other = self._user("other@example.com", UserType.CATERER,
                           "Silver Fork")
        pending = self._user("pending@example.com", UserType.CATERER,
                             "Pending Kitchen", minimum_guests=10,
                             status=CatererStatus.PENDING)
        buyer = self._user("buyer@example.com", UserType.USER)
        other_buyer = self._user("buyer2@example.com", UserType.USER)
        db.flush()

        def dish(owner, name, price, pieces, category):
            d = Dish(name=name, caterer_id=owner.id, cuisine_type_id=arabic.id,
                     category_id=category.id if category else None,
                     pieces=pieces, price=price, currency="AED")
            db.add(d)
            return d

        mandi = dish(caterer, "Lamb Mandi", 45, 2, self.main_course)
        kunafa = dish(caterer, "Kunafa", 12, 1, self.desserts)
        bread = dish(caterer, "Khubz", 3, 1, None)
        foreign = dish(other, "Biryani", 30, 1, self.main_course)
        pending_dish = dish(pending, "Harees", 20, 1, self.main_course)
        db.commit()

        self.caterer_id = caterer.id
        self.other_caterer_id = other.id
        self.pending_caterer_id = pending.id
        self.buyer_id = buyer.id
        self.mandi_id = mandi.id
        self.kunafa_id = kunafa.id
        self.bread_id = bread.id
        self.foreign_dish_id = foreign.id
        self.pending_dish_id = pending_dish.id
        self.wedding_id = self.wedding.id
        self.birthday_id = self.birthday.id
        self.main_course_id = self.main_course.id
        self.desserts_id = self.desserts.id

        self.caterer_headers = self._headers(caterer)
        self.other_headers = self._headers(other)
        self.buyer_headers = self._headers(buyer)
        self.other_buyer_headers = self._headers(other_buyer)

    @staticmethod
    def _headers(user):
        return {"Authorization": f"Bearer {token_for(user)}"}

    def set_minimum_guests(self, caterer_id, value):
        info = self.db.query(CatererInfo).filter(
            CatererInfo.caterer_id == caterer_id).first()
        info.minimum_guests = value
        self.db.commit()

    # request helpers

    def create_package(self, headers=None, **body):
        body.setdefault("name", "Wedding Feast")
        return self.client.post("/caterer/packages", json=body,
                                headers=headers or self.caterer_headers)

    def create_item(self, dish_id, people_count=20, headers=None, **body):
        body.update({"dish_id": dish_id, "people_count": people_count})
        return self.client.post("/caterer/packages/items", json=body,
                                headers=headers or self.caterer_headers)
