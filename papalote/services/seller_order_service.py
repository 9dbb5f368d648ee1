"""
Seller Order Service - orders routed to a maker

An order belongs to every seller whose name matches the maker of at least
one of its items (case-insensitive). Sellers get a "new orders" badge for
orders they have not marked as seen.
"""
import logging
from typing import Dict, List, Optional

from papalote.core.errors import NotFoundError, ValidationError
from papalote.domain.order import CompleteOrder, ORDER_STATUSES, OrderItem
from papalote.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


def seller_items(order: CompleteOrder, seller_name: str) -> List[OrderItem]:
    """Items of an order made by the given seller"""
    name_lower = seller_name.lower()
    return [item for item in order.items if item.maker.lower() == name_lower]


def seller_order_total(order: CompleteOrder, seller_name: str) -> float:
    """Seller's portion of an order (sum of their line totals)"""
    return sum(item.price * item.quantity for item in seller_items(order, seller_name))


class SellerOrderService:
    """
    Service for the seller's order inbox

    Usage:
        service = SellerOrderService()
        new_orders = service.new_orders("Tejidos Sofía")
        service.mark_all_seen("Tejidos Sofía")
    """

    def __init__(self, repo: Optional[OrderRepository] = None):
        self.repo = repo or OrderRepository()

    def orders_for_seller(self, seller_name: str) -> List[CompleteOrder]:
        if not seller_name:
            raise ValidationError("sellerName is required")
        return self.repo.find_by_maker(seller_name)

    def new_orders(self, seller_name: str) -> List[CompleteOrder]:
        seen = set(self.repo.get_seen_ids(seller_name))
        return [order for order in self.orders_for_seller(seller_name) if order.id not in seen]

    def mark_seen(self, seller_name: str, order_ids: List[str]) -> List[str]:
        """Merge order IDs into the seen list; returns the full seen list"""
        return self.repo.add_seen_ids(seller_name, order_ids)

    def mark_all_seen(self, seller_name: str) -> List[str]:
        order_ids = [order.id for order in self.orders_for_seller(seller_name)]
        return self.repo.add_seen_ids(seller_name, order_ids)

    def seller_view(self, order: CompleteOrder, seller_name: str) -> Dict:
        """Order as shown to one seller: only their items and their total"""
        data = order.to_dict()
        data["sellerItems"] = [item.to_dict() for item in seller_items(order, seller_name)]
        data["sellerTotal"] = seller_order_total(order, seller_name)
        return data

    def inbox(self, seller_name: str) -> Dict:
        """Seller orders with the new ones flagged"""
        seen = set(self.repo.get_seen_ids(seller_name))
        orders = []
        for order in self.orders_for_seller(seller_name):
            data = self.seller_view(order, seller_name)
            data["isNew"] = order.id not in seen
            orders.append(data)
        return {
            "orders": orders,
            "newCount": sum(1 for order in orders if order["isNew"]),
        }

    def update_status(self, order_id: str, status: str, tracking: Optional[str] = None) -> CompleteOrder:
        """
        Change an order's status

        Raises:
            ValidationError: if status is not a known order status
            NotFoundError: if the order does not exist
        """
        if status not in ORDER_STATUSES:
            raise ValidationError(f"Estado de pedido inválido: {status}")

        order = self.repo.update_status(order_id, status, tracking)
        if order is None:
            raise NotFoundError(f"Pedido no encontrado: {order_id}")

        logger.info(f"Order {order_id} status -> {status}" + (f" (tracking {tracking})" if tracking else ""))
        return order
