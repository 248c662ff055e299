import unittest

from catering_server.models import Category, CuisineType, Occasion
from catering_server.scripts.seed_catalog import DEFAULT_CATEGORIES, seed_catalog
from tests.support import ApiTestCase


class TestMetadataAPI(ApiTestCase):

    def test_categories_with_sub_categories(self):
        data = self.client.get("/metadata/categories").json()
        by_name = {c["name"]: c for c in data}
        self.assertEqual([s["name"] for s in by_name["Main Course"]["sub_categories"]],
                         ["Rice Dishes"])
        self.assertEqual(by_name["Desserts"]["sub_categories"], [])

    def test_cuisine_types_and_occasions(self):
        cuisines = self.client.get("/metadata/cuisine-types").json()
        self.assertEqual([c["name"] for c in cuisines], ["Arabic"])
        occasions = self.client.get("/metadata/occasions").json()
        self.assertEqual([o["name"] for o in occasions], ["Birthday", "Wedding"])

    def test_seed_catalog_only_adds_missing_rows(self):
        counts = seed_catalog(self.db)
        # "Main Course" and "Desserts" already exist
        self.assertEqual(counts["categories"], len(DEFAULT_CATEGORIES) - 2)
        self.assertEqual(self.db.query(Category).count(), len(DEFAULT_CATEGORIES))

        again = seed_catalog(self.db)
        self.assertEqual(again, {"categories": 0, "cuisine_types": 0, "occasions": 0})
        self.assertEqual(self.db.query(CuisineType).filter(
            CuisineType.name == "Arabic").count(), 1)
        self.assertEqual(self.db.query(Occasion).filter(
            Occasion.name == "Wedding").count(), 1)

    def test_root_and_health(self):
        self.assertEqual(self.client.get("/").json()["status"], "ok")
        self.assertEqual(self.client.get("/health").json()["status"], "healthy")


if __name__ == "__main__":
    unittest.main()
