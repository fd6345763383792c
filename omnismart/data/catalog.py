"""Catalog helpers: load stores.json / products.json and provide lookup utilities.

Search here is the coarse filter step only (case-insensitive substring on the
listed fields); ordering is left to the relevance scorer.
"""
from typing import List, Optional
import json

from ..app.config import Config
from ..schemas.io_models import Product, Store
from ..utils.logger import get_logger

logger = get_logger()


def _ilike(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


class CatalogStore:
    def __init__(self, stores_path: Optional[str] = None, products_path: Optional[str] = None):
        self.stores_path = stores_path or Config.STORES_PATH
        self.products_path = products_path or Config.PRODUCTS_PATH
        self.stores: List[Store] = []
        self.products: List[Product] = []
        self._load()

    def _load(self):
        self.stores = [Store(**row) for row in self._read_rows(self.stores_path)]
        self.products = [Product(**row) for row in self._read_rows(self.products_path)]
        logger.info(f"[CATALOG] Loaded {len(self.stores)} stores and {len(self.products)} products")

    @staticmethod
    def _read_rows(path: str) -> List[dict]:
        try:
            with open(path, encoding="utf-8") as f:
                rows = json.load(f)
        except FileNotFoundError:
            logger.warning(f"[CATALOG] File not found: {path}")
            return []
        if not isinstance(rows, list):
            raise ValueError(f"Catalog file {path} must contain a JSON list")
        return rows

    def initial_stores(self, limit: Optional[int] = None) -> List[Store]:
        limit = Config.INITIAL_STORE_LIMIT if limit is None else limit
        return list(self.stores[:limit])

    def initial_products(self, limit: Optional[int] = None) -> List[Product]:
        limit = Config.INITIAL_PRODUCT_LIMIT if limit is None else limit
        return list(self.products[:limit])

    def get_product(self, product_id: str) -> Optional[Product]:
        for p in self.products:
            if p.id == product_id:
                return p
        return None

    def get_store(self, store_id: str) -> Optional[Store]:
        for s in self.stores:
            if s.id == store_id:
                return s
        return None

    def search_stores(self, query: str) -> List[Store]:
        """Stores whose name or city contains ``query``."""
        q = query.lower()
        return [s for s in self.stores if _ilike(s.name, q) or _ilike(s.city, q)]

    def search_products(self, query: str) -> List[Product]:
        """Products whose name, category, brand or description contains ``query``."""
        q = query.lower()
        return [
            p for p in self.products
            if _ilike(p.name, q) or _ilike(p.category, q) or _ilike(p.brand, q) or _ilike(p.description, q)
        ]


# Provide a module-level singleton for convenience
_store: Optional[CatalogStore] = None


def get_catalog_store() -> CatalogStore:
    global _store
    if _store is None:
        _store = CatalogStore()
    return _store
