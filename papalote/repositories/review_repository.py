"""
Review Repository - product reviews left by buyers
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.seller import Review, ReviewResponse


class ReviewRepository:
    """Repository for Review data access"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_review(row: dict) -> Review:
        return Review.model_validate(row)

    def find_by_shop(self, shop_id: str) -> List[Review]:
        """Reviews for a shop, newest first"""
        reviews = [
            self._map_row_to_review(row)
            for row in self.store.reviews
            if row['shopId'] == shop_id
        ]
        return sorted(reviews, key=lambda r: r.date, reverse=True)

    def find_by_product(self, product_id: str) -> List[Review]:
        return [
            self._map_row_to_review(row)
            for row in self.store.reviews
            if str(row['productId']) == str(product_id)
        ]

    def find_by_buyer_name(self, buyer_name: str) -> List[Review]:
        name_lower = buyer_name.lower()
        return [
            self._map_row_to_review(row)
            for row in self.store.reviews
            if row['buyerName'].lower() == name_lower
        ]

    def add_response(self, review_id: str, response: ReviewResponse) -> Optional[Review]:
        """
        Attach (or replace) the seller's response to a review

        Returns:
            Updated Review or None if not found
        """
        for row in self.store.reviews:
            if row['id'] == review_id:
                row['response'] = response.to_dict()
                return self._map_row_to_review(row)
        return None
