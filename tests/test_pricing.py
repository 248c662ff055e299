import unittest
from decimal import Decimal

from catering_server.models.dish import Dish
from catering_server.models.package_item import AttachedTo, PackageItem, Unattached
from catering_server.utils.pricing import (calculate_items_total,
                                           effective_unit_price, price_per_person,
                                           quantize)


def make_item(dish_price, quantity=1, price_at_time=None):
    dish = Dish(name="dish", price=Decimal(str(dish_price)))
    return PackageItem(dish=dish, quantity=quantity, people_count=1,
                       price_at_time=price_at_time)


class TestPricing(unittest.TestCase):

    def test_snapshot_price_wins_over_dish_price(self):
        item = make_item(50, price_at_time=Decimal("45.00"))
        self.assertEqual(effective_unit_price(item), Decimal("45.00"))

    def test_missing_snapshot_falls_back_to_dish_price(self):
        item = make_item(50)
        self.assertEqual(effective_unit_price(item), Decimal("50"))

    def test_total_multiplies_price_guests_and_quantity(self):
        items = [
            make_item(45, quantity=2, price_at_time=Decimal("45")),
            make_item(12, quantity=1),
        ]
        self.assertEqual(calculate_items_total(items, 20), Decimal("2040.00"))

    def test_no_items_prices_to_zero(self):
        self.assertEqual(calculate_items_total([], 50), Decimal("0.00"))

    def test_total_is_rounded_to_cents(self):
        items = [make_item(Decimal("0.333"), quantity=1)]
        self.assertEqual(calculate_items_total(items, 3), Decimal("1.00"))

    def test_price_per_person(self):
        self.assertEqual(price_per_person(Decimal("2040"), 20), Decimal("102.00"))
        self.assertEqual(price_per_person(Decimal("100"), 3), Decimal("33.33"))
        self.assertEqual(price_per_person(Decimal("100"), 0), Decimal("0.00"))

    def test_quantize_rounds_half_up(self):
        self.assertEqual(quantize(Decimal("2.345")), Decimal("2.35"))
        self.assertEqual(quantize(1.005), Decimal("1.01"))


class TestAttachment(unittest.TestCase):

    def test_draft_item_is_unattached(self):
        item = PackageItem(package_id=None)
        self.assertEqual(item.attachment, Unattached())
        self.assertTrue(item.attachment.is_draft)

    def test_attach_and_detach(self):
        item = PackageItem()
        item.attach(7)
        self.assertEqual(item.attachment, AttachedTo(7))
        self.assertFalse(item.attachment.is_draft)
        item.detach()
        self.assertTrue(item.attachment.is_draft)


if __name__ == "__main__":
    unittest.main()
