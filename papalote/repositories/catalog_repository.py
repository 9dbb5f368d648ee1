"""
Catalog Repository - read-only reference data

Achievement definitions and per-seller analytics snapshots.
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.buyer import Achievement


class CatalogRepository:

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    def find_achievements(self) -> List[Achievement]:
        return [Achievement.model_validate(row) for row in self.store.achievements]

    def find_seller_analytics(self, seller_id: str) -> Optional[dict]:
        """Analytics snapshot for a seller (camelCase dict) or None"""
        snapshot = self.store.analytics.get(str(seller_id))
        return dict(snapshot) if snapshot else None
