"""
Shop Repository - Data Access Layer for maker shops
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.seller import Shop


class ShopRepository:
    """Repository for Shop data access"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_shop(row: dict) -> Shop:
        return Shop.model_validate(row)

    def find_all(self, state: Optional[str] = None) -> List[Shop]:
        """
        Find shops, optionally only those in a Mexican state

        Args:
            state: State name (case-insensitive)

        Returns:
            List of Shop models
        """
        shops = [self._map_row_to_shop(row) for row in self.store.shops]
        if state:
            state_lower = state.lower()
            shops = [shop for shop in shops if shop.state.lower() == state_lower]
        return shops

    def find_by_id(self, shop_id: str) -> Optional[Shop]:
        for row in self.store.shops:
            if row['id'] == shop_id:
                return self._map_row_to_shop(row)
        return None

    def find_by_owner(self, seller_id: str) -> Optional[Shop]:
        """Shop owned by a seller account"""
        for row in self.store.shops:
            if str(row.get('ownerId')) == str(seller_id):
                return self._map_row_to_shop(row)
        return None
