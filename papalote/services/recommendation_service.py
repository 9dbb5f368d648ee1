"""
Recommendation Service - "you may also like" for the product page
"""
from typing import Dict, List

from papalote.domain.product import Product


PRICE_TOLERANCE = 0.3
DEFAULT_LIMIT = 4

SIMILAR_WEIGHTS = {
    "same_category": 10,
    "same_maker": 8,
    "same_state": 5,
    "shared_material": 4,
    "similar_price": 3,
    "featured": 2,
    "verified": 1,
}

CROSS_CATEGORY_WEIGHTS = {
    "same_maker": 10,
    "same_state": 5,
    "shared_material": 3,
    "similar_price": 2,
    "featured": 2,
    "verified": 1,
}


def _is_similar_price(candidate: Product, reference: Product) -> bool:
    low = reference.price * (1 - PRICE_TOLERANCE)
    high = reference.price * (1 + PRICE_TOLERANCE)
    return low <= candidate.price <= high


def _score(candidate: Product, reference: Product, weights: Dict[str, int]) -> int:
    score = 0
    if candidate.category == reference.category:
        score += weights.get("same_category", 0)
    if candidate.maker == reference.maker:
        score += weights["same_maker"]
    if candidate.state == reference.state:
        score += weights["same_state"]

    shared = [m for m in candidate.materials if m in reference.materials]
    score += len(shared) * weights["shared_material"]

    if _is_similar_price(candidate, reference):
        score += weights["similar_price"]
    if candidate.featured:
        score += weights["featured"]
    if candidate.verified:
        score += weights["verified"]
    return score


def _rank(scored: List[tuple], limit: int) -> List[Product]:
    # Higher score first, ties broken by rating
    scored.sort(key=lambda item: (item[1], item[0].rating or 0), reverse=True)
    return [product for product, _ in scored[:limit]]


class RecommendationService:
    """
    Product recommendations

    Only in-stock products are ever recommended and the current product
    is always excluded.
    """

    @staticmethod
    def similar(current: Product, products: List[Product], limit: int = DEFAULT_LIMIT) -> List[Product]:
        candidates = [p for p in products if p.id != current.id and p.in_stock]
        scored = [(p, _score(p, current, SIMILAR_WEIGHTS)) for p in candidates]
        return _rank(scored, limit)

    @staticmethod
    def cross_category(current: Product, products: List[Product], limit: int = DEFAULT_LIMIT) -> List[Product]:
        """Products from other categories that share maker, state, materials or price"""
        candidates = [
            p for p in products
            if p.id != current.id and p.category != current.category and p.in_stock
        ]
        scored = [(p, _score(p, current, CROSS_CATEGORY_WEIGHTS)) for p in candidates]
        scored = [item for item in scored if item[1] > 0]
        return _rank(scored, limit)

    @staticmethod
    def recently_viewed(
        current_id: str,
        recent_ids: List[str],
        products: List[Product],
        limit: int = DEFAULT_LIMIT
    ) -> List[Product]:
        """Recently viewed products (most recent first), excluding the current one"""
        by_id = {p.id: p for p in products}
        result = []
        for product_id in recent_ids:
            product = by_id.get(product_id)
            if product_id != current_id and product is not None and product.in_stock:
                result.append(product)
        return result[:limit]

    @classmethod
    def combined(
        cls,
        current: Product,
        products: List[Product],
        recent_ids: List[str],
        similar_limit: int = DEFAULT_LIMIT,
        cross_category_limit: int = DEFAULT_LIMIT,
        recently_viewed_limit: int = DEFAULT_LIMIT,
    ) -> Dict[str, List[Product]]:
        return {
            "similar": cls.similar(current, products, similar_limit),
            "crossCategory": cls.cross_category(current, products, cross_category_limit),
            "recentlyViewed": cls.recently_viewed(current.id, recent_ids, products, recently_viewed_limit),
        }
