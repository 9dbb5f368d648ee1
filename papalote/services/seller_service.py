"""
Seller Service - dashboard data for a seller account

Sellers are identified by their account ID; their shop is the one they own.
Orders are matched by the shop name (the maker of each order item).
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.domain.seller import (
    MessageReply,
    PRIORITY_ORDER,
    Review,
    ReviewResponse,
    SellerMessage,
    SellerTask,
    Shop,
)
from papalote.repositories.catalog_repository import CatalogRepository
from papalote.repositories.message_repository import MessageRepository
from papalote.repositories.order_repository import OrderRepository
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.review_repository import ReviewRepository
from papalote.repositories.seller_product_repository import SellerProductRepository
from papalote.repositories.shop_repository import ShopRepository
from papalote.services.pricing_service import round_money
from papalote.services.seller_order_service import seller_items


logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 3
LOW_RATING_THRESHOLD = 3
TOP_PRODUCTS_LIMIT = 5

# Orders that still need the seller's attention
OPEN_ORDER_PRIORITIES = {
    "confirmed": "high",
    "processing": "high",
    "pending": "medium",
}


class SellerService:
    """
    Service for the seller dashboard: analytics, reviews, messages and tasks

    Usage:
        service = SellerService()
        tasks = service.tasks("3")
    """

    def __init__(
        self,
        shop_repo: Optional[ShopRepository] = None,
        product_repo: Optional[ProductRepository] = None,
        seller_product_repo: Optional[SellerProductRepository] = None,
        order_repo: Optional[OrderRepository] = None,
        review_repo: Optional[ReviewRepository] = None,
        message_repo: Optional[MessageRepository] = None,
        catalog_repo: Optional[CatalogRepository] = None,
    ):
        self.shops = shop_repo or ShopRepository()
        self.products = product_repo or ProductRepository()
        self.seller_products = seller_product_repo or SellerProductRepository()
        self.orders = order_repo or OrderRepository()
        self.reviews = review_repo or ReviewRepository()
        self.messages = message_repo or MessageRepository()
        self.catalog = catalog_repo or CatalogRepository()

    def get_shop(self, seller_id: str) -> Shop:
        """
        Shop owned by the seller

        Raises:
            NotFoundError: if the seller has no shop
        """
        shop = self.shops.find_by_owner(seller_id)
        if shop is None:
            raise NotFoundError(f"Tienda no encontrada para el vendedor: {seller_id}")
        return shop

    # ==================== Analytics ====================

    def analytics(self, seller_id: str) -> Dict:
        """
        Analytics snapshot plus figures computed from stored orders

        Cancelled orders are left out of the live figures.
        """
        shop = self.get_shop(seller_id)
        snapshot = self.catalog.find_seller_analytics(seller_id) or {}

        revenue = 0.0
        units = 0
        order_count = 0
        by_product: Dict[str, Dict] = defaultdict(lambda: {"units": 0, "revenue": 0.0})

        for order in self.orders.find_by_maker(shop.name):
            if order.status == "cancelled":
                continue
            order_count += 1
            for item in seller_items(order, shop.name):
                line_total = item.price * item.quantity
                revenue += line_total
                units += item.quantity
                entry = by_product[item.id]
                entry["productId"] = item.id
                entry["name"] = item.name
                entry["units"] += item.quantity
                entry["revenue"] += line_total

        top_products = sorted(by_product.values(), key=lambda p: p["revenue"], reverse=True)

        return {
            **snapshot,
            "sellerId": str(seller_id),
            "shopId": shop.id,
            "shopName": shop.name,
            "live": {
                "orders": order_count,
                "revenue": round_money(revenue),
                "units": units,
                "averageOrderValue": round_money(revenue / order_count) if order_count else 0,
                "topProducts": top_products[:TOP_PRODUCTS_LIMIT],
            },
        }

    # ==================== Reviews ====================

    def reviews_summary(self, seller_id: str) -> Dict:
        shop = self.get_shop(seller_id)
        reviews = self.reviews.find_by_shop(shop.id)
        average = round(sum(r.rating for r in reviews) / len(reviews), 1) if reviews else 0

        return {
            "reviews": [r.to_dict() for r in reviews],
            "total": len(reviews),
            "averageRating": average,
            "pendingResponses": sum(1 for r in reviews if r.response is None),
        }

    def respond_to_review(self, seller_id: str, review_id: str, text: str) -> Review:
        """
        Attach the seller's public response to a review of their shop

        Raises:
            ValidationError: if the response text is empty
            NotFoundError: if the review is not one of the shop's
        """
        if not text or not text.strip():
            raise ValidationError("La respuesta no puede estar vacía")

        shop = self.get_shop(seller_id)
        if not any(r.id == review_id for r in self.reviews.find_by_shop(shop.id)):
            raise NotFoundError(f"Reseña no encontrada: {review_id}")

        review = self.reviews.add_response(review_id, ReviewResponse(text=text.strip(), date=utc_now_iso()))
        logger.info(f"Seller {seller_id} responded to review {review_id}")
        return review

    # ==================== Messages ====================

    def messages_summary(self, seller_id: str) -> Dict:
        messages = self.messages.find_by_seller(seller_id)
        return {
            "messages": [m.to_dict() for m in messages],
            "total": len(messages),
            "unreadCount": sum(1 for m in messages if m.status == "unread"),
        }

    def _require_message(self, seller_id: str, message_id: str) -> None:
        if not any(m.id == message_id for m in self.messages.find_by_seller(seller_id)):
            raise NotFoundError(f"Mensaje no encontrado: {message_id}")

    def mark_message_read(self, seller_id: str, message_id: str) -> SellerMessage:
        self._require_message(seller_id, message_id)
        return self.messages.mark_read(message_id)

    def reply_to_message(self, seller_id: str, message_id: str, text: str) -> SellerMessage:
        """Reply as the seller; the conversation is marked read"""
        if not text or not text.strip():
            raise ValidationError("El mensaje no puede estar vacío")

        self._require_message(seller_id, message_id)
        reply = MessageReply(sender="seller", message=text.strip(), date=utc_now_iso())
        return self.messages.add_reply(message_id, reply)

    # ==================== Task centre ====================

    def tasks(self, seller_id: str) -> List[SellerTask]:
        """
        Actionable items for the seller, most urgent first

        Sources:
            - orders not yet shipped (confirmed/processing high, pending payment medium)
            - products with stock <= 3 (high) or 0 (critical)
            - unread messages (medium)
            - reviews without a response (rating <= 3 high, otherwise low)
        """
        shop = self.get_shop(seller_id)
        tasks: List[SellerTask] = []

        for order in self.orders.find_by_maker(shop.name):
            priority = OPEN_ORDER_PRIORITIES.get(order.status)
            if priority is None:
                continue
            items = seller_items(order, shop.name)
            tasks.append(SellerTask(
                id=f"order-{order.id}",
                type="order",
                priority=priority,
                title=f"Pedido {order.order_number}",
                description=(
                    "Esperando pago del cliente" if order.status == "pending"
                    else f"Preparar y enviar {sum(i.quantity for i in items)} producto(s)"
                ),
                reference_id=order.id,
                created_at=order.created_at,
            ))

        stock_levels = [(p.id, p.name, p.stock) for p in self.products.find_by_shop(shop.id)]
        stock_levels += [
            (p.id, p.name, p.stock)
            for p in self.seller_products.find_by_seller(seller_id, "published")
        ]
        for product_id, name, stock in stock_levels:
            if stock > LOW_STOCK_THRESHOLD:
                continue
            tasks.append(SellerTask(
                id=f"stock-{product_id}",
                type="stock",
                priority="critical" if stock == 0 else "high",
                title=f"Sin inventario: {name}" if stock == 0 else f"Inventario bajo: {name}",
                description=f"Quedan {stock} unidades",
                reference_id=product_id,
            ))

        for message in self.messages.find_by_seller(seller_id):
            if message.status != "unread":
                continue
            tasks.append(SellerTask(
                id=f"message-{message.id}",
                type="message",
                priority="medium",
                title=f"Mensaje de {message.sender.name}",
                description=message.subject,
                reference_id=message.id,
                created_at=message.date,
            ))

        for review in self.reviews.find_by_shop(shop.id):
            if review.response is not None:
                continue
            tasks.append(SellerTask(
                id=f"review-{review.id}",
                type="review",
                priority="high" if review.rating <= LOW_RATING_THRESHOLD else "low",
                title=f"Responder reseña de {review.buyer_name}",
                description=f"{review.rating} estrellas en {review.product_name}",
                reference_id=review.id,
                created_at=review.date,
            ))

        # sort is stable: same-priority tasks keep their source order
        tasks.sort(key=lambda task: PRIORITY_ORDER[task.priority])
        return tasks
