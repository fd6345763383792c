#!/usr/bin/env python3
"""
Test Suite for ShoppingCart and checkout.

TEST COVERAGE:
    - Cart add/merge, quantity changes, removal and totals
    - Checkout receipt format and payment status

USAGE:
    Run from project root: python -m pytest tests/test_cart.py -v
"""

import re
import unittest

from omnismart.app.cart import ShoppingCart, checkout, generate_qr_code
from omnismart.app.errors import CartError
from omnismart.schemas.io_models import CartItem, PaymentMethod, PaymentStatus, Sector


class TestShoppingCart(unittest.TestCase):

    def setUp(self):
        self.cart = ShoppingCart()
        self.shirt = CartItem(id="shirt-1", name="Formal Shirt", price=25.0, quantity=2,
                              location="2nd floor, Column 3, Line 3")
        self.pants = CartItem(id="pants-1", name="Chinos", price=30.0)

    def test_cart_initialization(self):
        self.assertTrue(self.cart.is_empty())
        self.assertEqual(self.cart.get_total(), 0.0)

    def test_add_and_merge(self):
        self.cart.add_item(self.shirt)
        self.cart.add_item(CartItem(id="shirt-1", name="Formal Shirt", price=25.0, quantity=1))
        self.cart.add_item(self.pants)
        self.assertEqual(len(self.cart.items), 2)
        self.assertEqual(self.cart.items[0].quantity, 3)
        self.assertEqual(self.cart.get_total(), 105.0)

    def test_add_does_not_alias_caller_item(self):
        self.cart.add_item(self.shirt)
        self.cart.change_quantity("shirt-1", 1)
        self.assertEqual(self.shirt.quantity, 2)

    def test_change_quantity_never_below_one(self):
        self.cart.add_item(self.pants)
        self.assertFalse(self.cart.change_quantity("pants-1", -1))
        self.assertEqual(self.cart.items[0].quantity, 1)
        self.assertTrue(self.cart.change_quantity("pants-1", 1))
        self.assertEqual(self.cart.items[0].quantity, 2)
        self.assertFalse(self.cart.change_quantity("missing", 1))

    def test_update_quantity(self):
        self.cart.add_item(self.shirt)
        self.cart.update_quantity("shirt-1", 5)
        self.assertEqual(self.cart.get_total(), 125.0)
        with self.assertRaises(CartError):
            self.cart.update_quantity("shirt-1", 0)
        with self.assertRaises(CartError):
            self.cart.update_quantity("missing", 1)

    def test_remove_and_clear(self):
        self.cart.add_item(self.shirt)
        self.cart.add_item(self.pants)
        self.assertTrue(self.cart.remove_item("shirt-1"))
        self.assertFalse(self.cart.remove_item("shirt-1"))
        self.cart.clear()
        self.assertTrue(self.cart.is_empty())

    def test_summary(self):
        self.cart.add_item(self.shirt)
        summary = self.cart.get_summary()
        self.assertIn("- 2x Formal Shirt (2nd floor, Column 3, Line 3): $50.00", summary)
        self.assertIn("Total: $50.00", summary)

    def test_dict_roundtrip(self):
        self.cart.add_item(self.shirt)
        restored = ShoppingCart.from_dict(self.cart.to_dict())
        self.assertEqual(restored.items, self.cart.items)
        self.assertTrue(ShoppingCart.from_dict(None).is_empty())


class TestCheckout(unittest.TestCase):

    def _cart(self):
        cart = ShoppingCart()
        cart.add_item(CartItem(id="a", name="Milk", price=3.12, quantity=2))
        return cart

    def test_qr_code_format(self):
        self.assertRegex(generate_qr_code(), r"^QR-\d{13,}-[0-9a-z]{9}$")

    def test_online_payment_completes(self):
        cart = self._cart()
        receipt = checkout(cart, PaymentMethod.online, Sector.retail)
        self.assertEqual(receipt.payment_status, PaymentStatus.completed)
        self.assertEqual(receipt.total_amount, 6.24)
        self.assertEqual(len(receipt.items), 1)
        self.assertTrue(re.match(r"^QR-", receipt.id))
        self.assertTrue(cart.is_empty())

    def test_cash_payment_pending(self):
        receipt = checkout(self._cart(), "cash")
        self.assertEqual(receipt.payment_method, PaymentMethod.cash)
        self.assertEqual(receipt.payment_status, PaymentStatus.pending)

    def test_empty_cart_rejected(self):
        with self.assertRaises(CartError):
            checkout(ShoppingCart(), PaymentMethod.online)

    def test_unknown_method_rejected(self):
        with self.assertRaises(CartError):
            checkout(self._cart(), "bitcoin")


if __name__ == "__main__":
    unittest.main()
