"""
Order Repository - Data Access Layer for Orders

Orders are kept newest first, the same order they are shown to buyers.
Also tracks which orders each seller has already seen.
"""
from typing import List, Optional

from papalote.core.dates import utc_now_iso
from papalote.core.storage import DataStore, get_store
from papalote.domain.order import CompleteOrder


class OrderRepository:
    """
    Repository for Order data access

    Returns CompleteOrder domain models, not raw dictionaries.
    """

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    @staticmethod
    def _map_row_to_order(row: dict) -> CompleteOrder:
        return CompleteOrder.model_validate(row)

    def find_all(self) -> List[CompleteOrder]:
        return [self._map_row_to_order(row) for row in self.store.orders]

    def find_by_id(self, order_id: str) -> Optional[CompleteOrder]:
        """
        Find order by ID

        Args:
            order_id: Order ID (e.g., "ORD-M1D2QX-9TR4BN")

        Returns:
            CompleteOrder or None if not found
        """
        for row in self.store.orders:
            if row['id'] == order_id:
                return self._map_row_to_order(row)
        return None

    def find_by_number(self, order_number: str) -> Optional[CompleteOrder]:
        """Find order by its human-readable number (e.g., "PM2510-6610")"""
        for row in self.store.orders:
            if row['orderNumber'] == order_number:
                return self._map_row_to_order(row)
        return None

    def find_by_email(self, email: str) -> List[CompleteOrder]:
        """Orders placed by a buyer (email match is case-insensitive)"""
        email_lower = email.lower()
        return [
            self._map_row_to_order(row)
            for row in self.store.orders
            if (row.get('userEmail') or '').lower() == email_lower
        ]

    def find_by_maker(self, seller_name: str) -> List[CompleteOrder]:
        """Orders containing at least one item from the given maker"""
        name_lower = seller_name.lower()
        return [
            self._map_row_to_order(row)
            for row in self.store.orders
            if any(item['maker'].lower() == name_lower for item in row['items'])
        ]

    def save(self, order: CompleteOrder) -> CompleteOrder:
        """Store a new order at the front of the list"""
        self.store.orders.insert(0, order.to_dict())
        return order

    def update_status(
        self,
        order_id: str,
        status: str,
        tracking: Optional[str] = None
    ) -> Optional[CompleteOrder]:
        """
        Update order status (and tracking number when given)

        Returns:
            Updated CompleteOrder or None if the order does not exist
        """
        for row in self.store.orders:
            if row['id'] == order_id:
                row['status'] = status
                if tracking:
                    row['tracking'] = tracking
                row['updatedAt'] = utc_now_iso()
                return self._map_row_to_order(row)
        return None

    # Seen orders (seller notifications)

    def get_seen_ids(self, seller_name: str) -> List[str]:
        return list(self.store.seen_orders.get(seller_name.lower(), []))

    def add_seen_ids(self, seller_name: str, order_ids: List[str]) -> List[str]:
        """Merge order IDs into the seller's seen list, without duplicates"""
        key = seller_name.lower()
        seen = self.store.seen_orders.setdefault(key, [])
        for order_id in order_ids:
            if order_id not in seen:
                seen.append(order_id)
        return list(seen)
