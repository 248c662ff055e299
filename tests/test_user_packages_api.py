import unittest
import warnings

from sqlalchemy.exc import SAWarning

from catering_server.schemas.user_package import UserPackageCreate
from catering_server.utils.user_package_service import UserPackageService
from tests.support import ApiTestCase


class TestUserPackagesAPI(ApiTestCase):

    def compose(self, headers=None, **body):
        body.setdefault("caterer_id", self.caterer_id)
        body.setdefault("dish_ids", [self.mandi_id, self.kunafa_id])
        return self.client.post("/user/packages", json=body,
                                headers=headers or self.buyer_headers)

    def test_buyer_composes_customisable_package(self):
        resp = self.compose(occasion_ids=[self.wedding_id])
        self.assertEqual(resp.status_code, 201)
        package = resp.json()
        self.assertEqual(package["created_by"], "USER")
        self.assertEqual(package["customisation_type"], "CUSTOMISABLE")
        self.assertEqual(package["user_id"], self.buyer_id)
        self.assertEqual(package["minimum_people"], 20)
        self.assertEqual(package["total_price"], 2040.0)
        self.assertEqual([o["name"] for o in package["occasions"]], ["Wedding"])

    def test_compose_persists_items_without_orm_warnings(self):
        data = UserPackageCreate(caterer_id=self.caterer_id,
                                 dish_ids=[self.mandi_id, self.kunafa_id])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            package = UserPackageService.create(self.db, self.buyer_id, data)

        dropped = [w for w in caught if issubclass(w.category, SAWarning)
                   and "not in session" in str(w.message)]
        self.assertEqual(dropped, [])
        self.assertEqual(sorted(item.dish_id for item in package.items),
                         sorted([self.mandi_id, self.kunafa_id]))
        self.assertTrue(all(item.package_id == package.id for item in package.items))

    def test_buyer_package_follows_dish_price_changes(self):
        package = self.compose().json()
        caterer_package = self.create_package(
            dish_ids=[self.mandi_id, self.kunafa_id]).json()

        self.client.put(f"/caterer/dishes/{self.mandi_id}", json={"price": 50},
                        headers=self.caterer_headers)

        resp = self.client.get(f"/user/packages/{package['id']}",
                               headers=self.buyer_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["total_price"], 2240.0)

        # caterer packages keep their snapshot
        resp = self.client.get(f"/user/packages/{caterer_package['id']}")
        self.assertEqual(resp.json()["total_price"], 2040.0)

    def test_buyer_packages_are_private(self):
        package = self.compose().json()
        url = f"/user/packages/{package['id']}"
        self.assertEqual(self.client.get(url, headers=self.other_buyer_headers).status_code, 404)
        self.assertEqual(self.client.get(url).status_code, 404)

        mine = self.client.get("/user/packages/mine", headers=self.buyer_headers).json()
        self.assertEqual([p["id"] for p in mine], [package["id"]])

    def test_buyer_packages_stay_out_of_caterer_registry(self):
        package = self.compose().json()
        resp = self.client.get(f"/caterer/packages/{package['id']}",
                               headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get("/caterer/packages",
                                         headers=self.caterer_headers).json(), [])
        items = self.client.get("/caterer/packages/items",
                                headers=self.caterer_headers).json()
        self.assertEqual(sum(len(g["items"]) for g in items["categories"]), 0)

    def test_only_buyers_compose_packages(self):
        resp = self.compose(headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 403)

    def test_caterer_must_be_approved(self):
        resp = self.compose(caterer_id=self.pending_caterer_id,
                            dish_ids=[self.pending_dish_id])
        self.assertEqual(resp.status_code, 404)

    def test_dishes_must_come_from_the_chosen_caterer(self):
        resp = self.compose(dish_ids=[self.mandi_id, self.foreign_dish_id])
        self.assertEqual(resp.status_code, 404)

    def test_caterer_without_minimum_needs_explicit_guest_count(self):
        resp = self.compose(caterer_id=self.other_caterer_id,
                            dish_ids=[self.foreign_dish_id])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "configuration_error")

        resp = self.compose(caterer_id=self.other_caterer_id,
                            dish_ids=[self.foreign_dish_id], minimum_people=10)
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["total_price"], 300.0)

    def test_public_listing_of_caterer_packages(self):
        self.create_package(dish_ids=[self.kunafa_id])
        self.create_package(name="Hidden", is_available=False)
        self.compose()

        resp = self.client.get(f"/user/caterers/{self.caterer_id}/packages")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["name"] for p in resp.json()], ["Wedding Feast"])

        resp = self.client.get(f"/user/caterers/{self.pending_caterer_id}/packages")
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
