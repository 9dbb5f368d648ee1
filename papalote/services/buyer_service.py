"""
Buyer Service - buyer profile: orders, saved addresses, favorites,
achievements and purchase impact
"""
import logging
from typing import Dict, List, Optional

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.domain.buyer import (
    AchievementProgress,
    BuyerMetrics,
    FavoriteProduct,
    ImpactSummary,
)
from papalote.domain.order import CompleteOrder, SavedAddress
from papalote.repositories.address_repository import AddressRepository
from papalote.repositories.catalog_repository import CatalogRepository
from papalote.repositories.favorite_repository import FavoriteRepository
from papalote.repositories.order_repository import OrderRepository
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.review_repository import ReviewRepository
from papalote.services.checkout_service import generate_address_id
from papalote.services.pricing_service import round_money
from papalote.services.settings_service import SettingsService


logger = logging.getLogger(__name__)


class BuyerService:
    """
    Service for the buyer profile pages

    Usage:
        service = BuyerService()
        impact = service.impact("juan@ejemplo.com")
    """

    def __init__(
        self,
        order_repo: Optional[OrderRepository] = None,
        address_repo: Optional[AddressRepository] = None,
        favorite_repo: Optional[FavoriteRepository] = None,
        product_repo: Optional[ProductRepository] = None,
        review_repo: Optional[ReviewRepository] = None,
        catalog_repo: Optional[CatalogRepository] = None,
        settings_service: Optional[SettingsService] = None,
    ):
        self.orders = order_repo or OrderRepository()
        self.addresses = address_repo or AddressRepository()
        self.favorites = favorite_repo or FavoriteRepository()
        self.products = product_repo or ProductRepository()
        self.reviews = review_repo or ReviewRepository()
        self.catalog = catalog_repo or CatalogRepository()
        self.settings = settings_service or SettingsService()

    # ==================== Orders ====================

    def orders_for(self, email: str) -> List[CompleteOrder]:
        return self.orders.find_by_email(email)

    def get_order(self, reference: str, email: Optional[str] = None) -> CompleteOrder:
        """
        Find an order by ID or order number

        When email is given, the order must belong to that buyer.

        Raises:
            NotFoundError: if no matching order exists
        """
        order = self.orders.find_by_id(reference) or self.orders.find_by_number(reference)
        if order is None or (email and (order.user_email or "").lower() != email.lower()):
            raise NotFoundError(f"Pedido no encontrado: {reference}")
        return order

    # ==================== Addresses ====================

    def list_addresses(self, email: str) -> List[SavedAddress]:
        return self.addresses.find_by_email(email)

    def default_address(self, email: str) -> Optional[SavedAddress]:
        """The default address, else the first saved one, else None"""
        addresses = self.addresses.find_by_email(email)
        for address in addresses:
            if address.is_default:
                return address
        return addresses[0] if addresses else None

    def save_address(self, email: str, data: Dict) -> SavedAddress:
        """Save an address; one without an ID gets a new one"""
        data = dict(data)
        data.setdefault("id", None)
        if not data["id"]:
            data["id"] = generate_address_id()
        return self.addresses.save(email, SavedAddress.model_validate(data))

    def delete_address(self, email: str, address_id: str) -> None:
        if not self.addresses.delete(email, address_id):
            raise NotFoundError(f"Dirección no encontrada: {address_id}")

    # ==================== Favorites ====================

    def list_favorites(self, email: str) -> List[FavoriteProduct]:
        return self.favorites.find_by_email(email)

    def add_favorite(self, email: str, product_id: str) -> FavoriteProduct:
        """
        Save a product as favorite (idempotent)

        Raises:
            ValidationError: if email or product_id is missing
            NotFoundError: if the product does not exist
        """
        if not email or not product_id:
            raise ValidationError("email and productId are required")

        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Producto no encontrado: {product_id}")

        favorite = FavoriteProduct(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            maker=product.maker,
            added_at=utc_now_iso(),
        )
        return self.favorites.add(email, favorite)

    def remove_favorite(self, email: str, product_id: str) -> bool:
        if not email or not product_id:
            raise ValidationError("email and productId are required")
        return self.favorites.remove(email, product_id)

    def is_favorite(self, email: str, product_id: str) -> bool:
        return self.favorites.exists(email, product_id)

    # ==================== Achievements ====================

    def _active_orders(self, email: str) -> List[CompleteOrder]:
        return [o for o in self.orders.find_by_email(email) if o.status != "cancelled"]

    def metrics(self, email: str, buyer_name: Optional[str] = None) -> BuyerMetrics:
        """
        Counters that drive achievements

        Cancelled orders do not count. Reviews are matched by buyer name.
        """
        orders = self._active_orders(email)
        items = [item for order in orders for item in order.items]

        categories = set()
        for item in items:
            product = self.products.find_by_id(item.id)
            if product is not None:
                categories.add(product.category)

        return BuyerMetrics(
            orders_count=len(orders),
            artisans_count=len({item.maker for item in items}),
            states_count=len({item.state for item in items if item.state}),
            favorites_count=len(self.favorites.find_by_email(email)),
            reviews_count=len(self.reviews.find_by_buyer_name(buyer_name)) if buyer_name else 0,
            categories_count=len(categories),
        )

    def achievements(self, email: str, buyer_name: Optional[str] = None) -> Dict:
        """Achievement catalog with this buyer's progress"""
        metrics = self.metrics(email, buyer_name)
        values = metrics.model_dump()

        progress_list = []
        for achievement in self.catalog.find_achievements():
            current = values.get(achievement.metric, 0)
            progress = min(current, achievement.threshold)
            progress_list.append(AchievementProgress(
                **achievement.model_dump(),
                progress=progress,
                percentage=round_money(progress / achievement.threshold * 100) if achievement.threshold else 100,
                unlocked=current >= achievement.threshold,
            ))

        unlocked = [a for a in progress_list if a.unlocked]
        return {
            "achievements": [a.to_dict() for a in progress_list],
            "metrics": metrics.to_dict(),
            "unlockedCount": len(unlocked),
            "totalPoints": sum(a.points for a in unlocked),
        }

    # ==================== Impact ====================

    def impact(self, email: str) -> ImpactSummary:
        """
        What the buyer's purchases meant for artisans

        amount_to_artisans is the total spent minus the platform commission
        set in the admin settings.
        """
        orders = self._active_orders(email)
        items = [item for order in orders for item in order.items]
        total_spent = sum(order.total for order in orders)
        commission = self.settings.commission_rate()

        return ImpactSummary(
            total_spent=round_money(total_spent),
            orders_count=len(orders),
            items_count=sum(item.quantity for item in items),
            artisans_supported=len({item.maker for item in items}),
            states_reached=len({item.state for item in items if item.state}),
            amount_to_artisans=round_money(total_spent * (1 - commission)),
            platform_commission=round_money(total_spent * commission),
        )
