#!/usr/bin/env python3
"""
Search module for the OmniSmart assistant.

Filters the catalog on substring matches, scores every hit and returns both
lists ordered by relevance.
"""

from typing import Optional

from .errors import InvalidQueryError
from .relevance import rank
from ..data.catalog import CatalogStore, get_catalog_store
from ..schemas.io_models import GeoPoint, ScoredProduct, ScoredStore, SearchResponse
from ..utils.logger import get_logger
from ..utils.pricing import format_price

logger = get_logger()


class SearchService:
    """Catalog search ranked by the relevance scorer."""

    def __init__(self, catalog: Optional[CatalogStore] = None):
        self.catalog = catalog or get_catalog_store()

    def search(self, query: str, location: Optional[GeoPoint] = None) -> SearchResponse:
        """
        Search stores and products.

        Args:
            query: User query text
            location: Optional caller position, forwarded to store scoring

        Returns:
            Search response with ranked stores and products

        Raises:
            InvalidQueryError: if the query is empty or blank
        """
        if not query or not query.strip():
            raise InvalidQueryError("Search query must not be empty")

        logger.info(f"[WORKFLOW] Search query: '{query}' location={'yes' if location else 'no'}")
        stores = self.catalog.search_stores(query)
        products = self.catalog.search_products(query)
        logger.debug(f"[SEARCH] Filter matched {len(stores)} stores, {len(products)} products")

        ranked_stores = [
            ScoredStore(store=s, relevance_score=score)
            for s, score in rank(stores, query, location)
        ]
        ranked_products = [
            ScoredProduct(product=p, relevance_score=score, pricing=format_price(p.price, p.discount))
            for p, score in rank(products, query)
        ]

        return SearchResponse(
            query=query,
            stores=ranked_stores,
            products=ranked_products,
            message=f"Found {len(ranked_stores)} stores and {len(ranked_products)} products",
        )
