"""
Favorite Repository - buyer favorites keyed by email
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.buyer import FavoriteProduct


class FavoriteRepository:
    """Repository for FavoriteProduct data access"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    def _rows(self, email: str) -> List[dict]:
        return self.store.favorites.setdefault(email.lower(), [])

    def find_by_email(self, email: str) -> List[FavoriteProduct]:
        return [FavoriteProduct.model_validate(row) for row in self._rows(email)]

    def exists(self, email: str, product_id: str) -> bool:
        return any(str(row['productId']) == str(product_id) for row in self._rows(email))

    def add(self, email: str, favorite: FavoriteProduct) -> FavoriteProduct:
        """Add a favorite; adding the same product twice keeps the first entry"""
        for row in self._rows(email):
            if str(row['productId']) == favorite.product_id:
                return FavoriteProduct.model_validate(row)

        self._rows(email).append(favorite.to_dict())
        return favorite

    def remove(self, email: str, product_id: str) -> bool:
        rows = self._rows(email)
        remaining = [row for row in rows if str(row['productId']) != str(product_id)]
        self.store.favorites[email.lower()] = remaining
        return len(remaining) != len(rows)
