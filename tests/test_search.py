#!/usr/bin/env python3
"""
Test Suite for the catalog store and ranked search.

USAGE:
    Run from project root: python -m pytest tests/test_search.py -v
"""

import json
import os
import tempfile
import unittest

from omnismart.agents.retail_agent import CASUAL_SHIRT_ITEM, FORMAL_SHIRT_ITEM, PANTS_ITEM
from omnismart.app.errors import InvalidQueryError
from omnismart.app.search import SearchService
from omnismart.data.catalog import CatalogStore
from omnismart.schemas.io_models import GeoPoint
from omnismart.utils.pricing import format_price

STORES = [
    {"id": "s1", "name": "Eastside Market", "city": "Bellevue", "services": ["grocery_pickup"], "offers": []},
    {"id": "s2", "name": "Grocery Outlet", "city": "Seattle", "services": ["grocery_pickup"], "offers": [{"description": "deal"}]},
    {"id": "s3", "name": "Hardware Hub", "city": "Seattle", "services": [], "offers": []},
]

PRODUCTS = [
    {"id": "p1", "name": "Bamboo Brush", "category": "Personal Care", "brand": "Equate", "price": 6.0,
     "description": "Grocery aisle favourite", "sustainability_score": 95},
    {"id": "p2", "name": "Grocery Bag", "category": "Home Goods", "brand": None, "price": 1.0, "discount": 10},
    {"id": "p3", "name": "Hammer", "category": "Tools", "brand": "Stanley", "price": 12.0},
]


class TestCatalogSearch(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        stores_path = os.path.join(self.tmp.name, "stores.json")
        products_path = os.path.join(self.tmp.name, "products.json")
        with open(stores_path, "w", encoding="utf-8") as f:
            json.dump(STORES, f)
        with open(products_path, "w", encoding="utf-8") as f:
            json.dump(PRODUCTS, f)
        self.catalog = CatalogStore(stores_path, products_path)
        self.service = SearchService(self.catalog)

    def tearDown(self):
        self.tmp.cleanup()

    def test_filters_on_listed_fields(self):
        self.assertEqual([s.id for s in self.catalog.search_stores("seattle")], ["s2", "s3"])
        # description match only
        self.assertEqual([p.id for p in self.catalog.search_products("aisle")], ["p1"])
        self.assertEqual([p.id for p in self.catalog.search_products("STANLEY")], ["p3"])

    def test_initial_listing_limits(self):
        self.assertEqual(len(self.catalog.initial_stores(2)), 2)
        self.assertEqual(len(self.catalog.initial_products(0)), 0)

    def test_search_ranks_by_score(self):
        result = self.service.search("grocery")
        # s2: name 10 + service 8 + offer 3; s1 matches neither name nor city
        self.assertEqual([s.store.id for s in result.stores], ["s2"])
        self.assertEqual(result.stores[0].relevance_score, 21)
        self.assertEqual([p.product.id for p in result.products], ["p2", "p1"])
        self.assertEqual([p.relevance_score for p in result.products], [12, 3])
        self.assertEqual(result.message, "Found 1 stores and 2 products")

    def test_location_bonus_applies_to_stores(self):
        plain = self.service.search("seattle")
        located = self.service.search("seattle", GeoPoint(lat=47.6, lon=-122.3))
        for a, b in zip(plain.stores, located.stores):
            self.assertEqual(b.relevance_score - a.relevance_score, 5)

    def test_blank_query_rejected(self):
        for q in ["", "   "]:
            with self.assertRaises(InvalidQueryError):
                self.service.search(q)

    def test_missing_files_give_empty_catalog(self):
        catalog = CatalogStore(os.path.join(self.tmp.name, "nope.json"),
                               os.path.join(self.tmp.name, "nada.json"))
        self.assertEqual(catalog.stores, [])
        self.assertEqual(SearchService(catalog).search("tea").products, [])

    def test_product_lookup(self):
        self.assertEqual(self.catalog.get_product("p3").name, "Hammer")
        self.assertIsNone(self.catalog.get_store("missing"))


class TestPackagedCatalog(unittest.TestCase):

    def test_bundled_data_loads(self):
        catalog = CatalogStore()
        self.assertGreater(len(catalog.stores), 6)
        self.assertGreater(len(catalog.products), 12)
        self.assertEqual(len(catalog.initial_stores()), 6)
        self.assertEqual(len(catalog.initial_products()), 12)

    def test_retail_shelf_items_match_catalog(self):
        catalog = CatalogStore()
        for item in (FORMAL_SHIRT_ITEM, CASUAL_SHIRT_ITEM, PANTS_ITEM):
            product = catalog.get_product(item.id)
            self.assertIsNotNone(product, item.id)
            self.assertEqual(product.name, item.name)
            self.assertEqual(product.price, item.price)


class TestFormatPrice(unittest.TestCase):

    def test_discounted(self):
        info = format_price(100.0, 15)
        self.assertEqual(info.original, "100.00")
        self.assertEqual(info.final, "85.00")
        self.assertTrue(info.has_discount)

    def test_no_discount(self):
        info = format_price(4.5, None)
        self.assertEqual(info.final, "4.50")
        self.assertFalse(info.has_discount)


if __name__ == "__main__":
    unittest.main()
