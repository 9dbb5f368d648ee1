"""
Browsing Service - per-visitor comparison list, recently viewed and search history

All three lists live in the visitor's session and reset on restart.
"""
from typing import Dict, List, Optional

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError
from papalote.domain.product import Product
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.session_repository import SessionRepository


MAX_COMPARISON_PRODUCTS = 4
MIN_COMPARISON_PRODUCTS = 2
MAX_RECENTLY_VIEWED = 10
MAX_SEARCH_HISTORY = 10


class BrowsingService:
    """
    Session-scoped browsing lists

    Usage:
        service = BrowsingService(session_id)
        service.add_to_comparison("3")
    """

    def __init__(
        self,
        session_id: str,
        session_repo: Optional[SessionRepository] = None,
        product_repo: Optional[ProductRepository] = None,
    ):
        self.session = session_repo or SessionRepository(session_id)
        self.products = product_repo or ProductRepository()

    def _require_product(self, product_id: str) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Producto no encontrado: {product_id}")
        return product

    # ==================== Comparison ====================

    def get_comparison(self) -> List[Product]:
        return self.products.find_by_ids(self.session.get_list("comparison"))

    def add_to_comparison(self, product_id: str) -> bool:
        """
        Add a product to the comparison list

        Returns:
            False when it is already there or the list is full (4 products)
        """
        product = self._require_product(product_id)
        ids = self.session.get_list("comparison")
        if product.id in ids or len(ids) >= MAX_COMPARISON_PRODUCTS:
            return False
        ids.append(product.id)
        return True

    def remove_from_comparison(self, product_id: str) -> None:
        ids = self.session.get_list("comparison")
        self.session.set_list("comparison", [pid for pid in ids if pid != product_id])

    def toggle_comparison(self, product_id: str) -> bool:
        """Add or remove; returns whether the product is in the list afterwards"""
        if product_id in self.session.get_list("comparison"):
            self.remove_from_comparison(product_id)
            return False
        return self.add_to_comparison(product_id)

    def clear_comparison(self) -> None:
        self.session.set_list("comparison", [])

    def comparison_state(self) -> Dict:
        products = self.get_comparison()
        count = len(products)
        return {
            "products": [p.to_dict() for p in products],
            "count": count,
            "maxProducts": MAX_COMPARISON_PRODUCTS,
            "canAdd": count < MAX_COMPARISON_PRODUCTS,
            "isFull": count >= MAX_COMPARISON_PRODUCTS,
            "canCompare": count >= MIN_COMPARISON_PRODUCTS,
        }

    # ==================== Recently viewed ====================

    def record_view(self, product_id: str) -> List[str]:
        """Move the product to the front of the recently viewed list"""
        ids = [pid for pid in self.session.get_list("recently_viewed") if pid != product_id]
        ids.insert(0, product_id)
        return self.session.set_list("recently_viewed", ids[:MAX_RECENTLY_VIEWED])

    def recently_viewed_ids(self, exclude: Optional[str] = None) -> List[str]:
        return [pid for pid in self.session.get_list("recently_viewed") if pid != exclude]

    def recently_viewed(self) -> List[Product]:
        return self.products.find_by_ids(self.recently_viewed_ids())

    def clear_recently_viewed(self) -> None:
        self.session.set_list("recently_viewed", [])

    # ==================== Search history ====================

    def search_history(self) -> List[dict]:
        return list(self.session.get_list("search_history"))

    def add_search(self, query: str) -> List[dict]:
        """
        Record a search query

        Newest first; a repeated query (case-insensitive) moves to the front.
        Blank queries are ignored.
        """
        query = query.strip()
        if not query:
            return self.search_history()

        normalized = query.lower()
        history = [
            item for item in self.session.get_list("search_history")
            if item["query"].lower() != normalized
        ]
        history.insert(0, {"query": query, "timestamp": utc_now_iso()})
        return list(self.session.set_list("search_history", history[:MAX_SEARCH_HISTORY]))

    def remove_search(self, query: str) -> List[dict]:
        normalized = query.lower()
        history = [
            item for item in self.session.get_list("search_history")
            if item["query"].lower() != normalized
        ]
        return list(self.session.set_list("search_history", history))

    def clear_search_history(self) -> None:
        self.session.set_list("search_history", [])
