#!/usr/bin/env python3
"""
Test Suite for relevance scoring.

USAGE:
    Run from project root: python -m pytest tests/test_relevance.py -v
"""

import unittest

from omnismart.app.relevance import rank, score_entity, score_product, score_store
from omnismart.schemas.io_models import GeoPoint, Product, Store


def make_store(**overrides):
    data = {"id": "s1", "name": "Corner Shop", "city": "Seattle", "services": [], "offers": []}
    data.update(overrides)
    return Store(**data)


def make_product(**overrides):
    data = {"id": "p1", "name": "Plain Mug", "category": "Kitchen", "price": 5.0}
    data.update(overrides)
    return Product(**data)


class TestStoreScoring(unittest.TestCase):

    def setUp(self):
        self.here = GeoPoint(lat=47.6, lon=-122.3)

    def test_no_match_scores_zero(self):
        self.assertEqual(score_store(make_store(), "pharmacy"), 0)

    def test_each_rule(self):
        self.assertEqual(score_store(make_store(name="Pharmacy Plus"), "pharmacy"), 10)
        self.assertEqual(score_store(make_store(services=["24h_pharmacy"]), "pharmacy"), 8)
        self.assertEqual(score_store(make_store(offers=[{"description": "x"}]), "pharmacy"), 3)
        self.assertEqual(score_store(make_store(), "pharmacy", self.here), 5)

    def test_all_rules_add_up(self):
        store = make_store(name="Pharmacy Plus", services=["pharmacy"], offers=["deal"])
        self.assertEqual(score_store(store, "PHARMACY", self.here), 26)

    def test_non_string_services_ignored(self):
        store = make_store(services=[42, {"name": "pharmacy"}, None])
        self.assertEqual(score_store(store, "pharmacy"), 0)

    def test_service_bonus_counted_once(self):
        store = make_store(services=["pharmacy", "pharmacy_drive_thru"])
        self.assertEqual(score_store(store, "pharmacy"), 8)

    def test_name_match_strictly_increases_score(self):
        without = make_store(name="Corner Shop", services=["grocery"], offers=["x"])
        with_match = make_store(name="Corner Grocery Shop", services=["grocery"], offers=["x"])
        self.assertGreater(score_store(with_match, "grocery"), score_store(without, "grocery"))

    def test_location_adds_exactly_five(self):
        for store in [make_store(), make_store(name="Grocery", offers=["x"])]:
            self.assertEqual(
                score_store(store, "grocery", self.here) - score_store(store, "grocery"), 5
            )

    def test_scoring_does_not_mutate(self):
        store = make_store(services=["pharmacy"], offers=["x"])
        before = store.model_dump()
        score_store(store, "pharmacy", self.here)
        self.assertEqual(store.model_dump(), before)


class TestProductScoring(unittest.TestCase):

    def test_each_rule(self):
        self.assertEqual(score_product(make_product(name="Organic Tea"), "tea"), 10)
        self.assertEqual(score_product(make_product(category="Tea & Coffee"), "tea"), 7)
        self.assertEqual(score_product(make_product(brand="TeaCo"), "tea"), 5)
        self.assertEqual(score_product(make_product(sustainability_score=81), "tea"), 3)
        self.assertEqual(score_product(make_product(discount=5), "tea"), 2)

    def test_thresholds(self):
        self.assertEqual(score_product(make_product(sustainability_score=80), "tea"), 0)
        self.assertEqual(score_product(make_product(discount=0), "tea"), 0)
        self.assertEqual(score_product(make_product(brand=None, discount=None), "tea"), 0)

    def test_full_product_score(self):
        product = make_product(name="Green Tea", category="Tea", brand="Tea House",
                               sustainability_score=90, discount=10)
        self.assertEqual(score_product(product, "Tea"), 27)

    def test_location_ignored_for_products(self):
        product = make_product(name="Green Tea")
        self.assertEqual(score_entity(product, "tea", GeoPoint(lat=0, lon=0)),
                         score_entity(product, "tea"))

    def test_unsupported_entity(self):
        with self.assertRaises(TypeError):
            score_entity({"name": "tea"}, "tea")


class TestRanking(unittest.TestCase):

    def test_higher_scores_first_ties_keep_order(self):
        a = make_product(id="a", name="Mug")
        b = make_product(id="b", name="Tea Mug")
        c = make_product(id="c", name="Cup")
        d = make_product(id="d", name="Tea Cup")
        ranked = rank([a, b, c, d], "tea")
        self.assertEqual([p.id for p, _ in ranked], ["b", "d", "a", "c"])
        self.assertEqual([s for _, s in ranked], [10, 10, 0, 0])

    def test_idempotent(self):
        stores = [make_store(id=str(i), name=f"Shop {i}", offers=["x"] if i % 2 else []) for i in range(5)]
        self.assertEqual(rank(stores, "shop"), rank(stores, "shop"))


if __name__ == "__main__":
    unittest.main()
