import unittest

from tests.support import ApiTestCase


class TestAddOnsAPI(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.package = self.create_package(dish_ids=[self.mandi_id]).json()
        self.url = f"/caterer/packages/{self.package['id']}/add-ons"

    def test_create_rounds_price_to_whole_units(self):
        resp = self.client.post(self.url, json={"name": "Live station", "price": 12.5},
                                headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 201)
        add_on = resp.json()
        self.assertEqual(add_on["price"], 13)
        self.assertEqual(add_on["currency"], "AED")
        self.assertTrue(add_on["is_active"])

        resp = self.client.post(self.url, json={"name": "Napkins", "price": 2.49},
                                headers=self.caterer_headers)
        self.assertEqual(resp.json()["price"], 2)

    def test_negative_price_is_rejected(self):
        resp = self.client.post(self.url, json={"name": "Refund", "price": -1},
                                headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "validation_error")

    def test_only_fixed_packages_take_add_ons(self):
        package = self.create_package(customisation_type="CUSTOMISABLE").json()
        resp = self.client.post(f"/caterer/packages/{package['id']}/add-ons",
                                json={"name": "Dessert table", "price": 300},
                                headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"],
                         "Add-ons can only be added to FIXED menu packages")

    def test_update_list_and_delete(self):
        add_on = self.client.post(self.url, json={"name": "Tea", "price": 40},
                                  headers=self.caterer_headers).json()
        add_on_url = f"{self.url}/{add_on['id']}"

        resp = self.client.put(add_on_url, json={"price": 55.5, "is_active": False},
                               headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["price"], 56)
        self.assertFalse(resp.json()["is_active"])
        self.assertEqual(resp.json()["name"], "Tea")

        listed = self.client.get(self.url, headers=self.caterer_headers).json()
        self.assertEqual([a["id"] for a in listed], [add_on["id"]])

        resp = self.client.delete(add_on_url, headers=self.caterer_headers)
        self.assertEqual(resp.json(), {"success": True})
        self.assertEqual(self.client.get(add_on_url, headers=self.caterer_headers).status_code, 404)

    def test_add_ons_are_private_to_their_caterer(self):
        add_on = self.client.post(self.url, json={"name": "Tea", "price": 40},
                                  headers=self.caterer_headers).json()
        self.assertEqual(self.client.get(self.url, headers=self.other_headers).status_code, 404)
        self.assertEqual(self.client.post(self.url, json={"name": "x", "price": 1},
                                          headers=self.other_headers).status_code, 404)
        resp = self.client.put(f"{self.url}/{add_on['id']}", json={"price": 1},
                               headers=self.other_headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.delete(f"{self.url}/{add_on['id']}",
                                            headers=self.other_headers).status_code, 404)
        stored = self.client.get(f"{self.url}/{add_on['id']}",
                                 headers=self.caterer_headers).json()
        self.assertEqual(stored["price"], 40)

    def test_add_on_must_belong_to_the_package_in_the_path(self):
        add_on = self.client.post(self.url, json={"name": "Tea", "price": 40},
                                  headers=self.caterer_headers).json()
        other_package = self.create_package(name="Second").json()
        resp = self.client.get(
            f"/caterer/packages/{other_package['id']}/add-ons/{add_on['id']}",
            headers=self.caterer_headers)
        self.assertEqual(resp.status_code, 404)

    def test_package_view_shows_add_ons(self):
        self.client.post(self.url, json={"name": "Tea", "price": 40},
                         headers=self.caterer_headers)
        inactive = self.client.post(self.url, json={"name": "Coffee", "price": 45,
                                                    "is_active": False},
                                    headers=self.caterer_headers).json()
        caterer_view = self.client.get(f"/caterer/packages/{self.package['id']}",
                                       headers=self.caterer_headers).json()
        self.assertEqual(len(caterer_view["add_ons"]), 2)

        public_view = self.client.get(f"/user/packages/{self.package['id']}").json()
        self.assertEqual([a["name"] for a in public_view["add_ons"]], ["Tea"])
        self.assertNotIn(inactive["id"], [a["id"] for a in public_view["add_ons"]])


if __name__ == "__main__":
    unittest.main()
