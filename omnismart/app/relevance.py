#!/usr/bin/env python3
"""
Relevance scoring module for the OmniSmart assistant.

Scores are additive integer points, one independent rule per field, with no
normalization and no real distance computation. They only decide the order
of results that were already fetched.
"""

from typing import Iterable, List, Optional, Tuple, TypeVar, Union

from ..schemas.io_models import GeoPoint, Product, Store

# Store rules
STORE_NAME_POINTS = 10
STORE_SERVICE_POINTS = 8
STORE_OFFER_POINTS = 3
STORE_LOCATION_POINTS = 5

# Product rules
PRODUCT_NAME_POINTS = 10
PRODUCT_CATEGORY_POINTS = 7
PRODUCT_BRAND_POINTS = 5
PRODUCT_SUSTAINABILITY_POINTS = 3
PRODUCT_DISCOUNT_POINTS = 2
SUSTAINABILITY_THRESHOLD = 80

T = TypeVar("T", Store, Product)


def score_store(store: Store, query: str, location: Optional[GeoPoint] = None) -> int:
    """
    Score a store against a query.

    Args:
        store: Store to score (never mutated)
        query: Raw query text; compared lowercase
        location: Caller's position; presence alone earns a flat bonus

    Returns:
        Non-negative integer score
    """
    score = 0
    q = query.lower()

    if q in store.name.lower():
        score += STORE_NAME_POINTS

    if any(isinstance(s, str) and q in s.lower() for s in store.services or []):
        score += STORE_SERVICE_POINTS

    if store.offers:
        score += STORE_OFFER_POINTS

    if location is not None:
        score += STORE_LOCATION_POINTS

    return score


def score_product(product: Product, query: str) -> int:
    """
    Score a product against a query.

    Args:
        product: Product to score (never mutated)
        query: Raw query text; compared lowercase

    Returns:
        Non-negative integer score
    """
    score = 0
    q = query.lower()

    if q in product.name.lower():
        score += PRODUCT_NAME_POINTS

    if q in product.category.lower():
        score += PRODUCT_CATEGORY_POINTS

    if product.brand and q in product.brand.lower():
        score += PRODUCT_BRAND_POINTS

    if product.sustainability_score and product.sustainability_score > SUSTAINABILITY_THRESHOLD:
        score += PRODUCT_SUSTAINABILITY_POINTS

    if product.discount and product.discount > 0:
        score += PRODUCT_DISCOUNT_POINTS

    return score


def score_entity(entity: Union[Store, Product], query: str, location: Optional[GeoPoint] = None) -> int:
    """Score a store or a product; ``location`` only affects stores."""
    if isinstance(entity, Store):
        return score_store(entity, query, location)
    if isinstance(entity, Product):
        return score_product(entity, query)
    raise TypeError(f"Cannot score {type(entity).__name__}")


def rank(entities: Iterable[T], query: str, location: Optional[GeoPoint] = None) -> List[Tuple[T, int]]:
    """
    Pair each entity with its score and sort by score, highest first.

    The sort is stable, so equal scores keep the order the entities were fetched in.
    """
    scored = [(e, score_entity(e, query, location)) for e in entities]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)
