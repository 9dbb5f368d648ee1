"""
Checkout Service - shipping, order summary and order placement

Business rules:
- Shipping is free from 1,000 MXN; otherwise 150 MXN, plus 50 MXN for remote states
- Delivery takes 5-8 days, 7-10 days for remote states
- Gift wrap costs 50 MXN
- OXXO and SPEI orders wait for payment (pending/pending); every other
  method is confirmed with a completed payment
- A free-shipping coupon zeroes the shipping cost and adds no product discount
"""
import logging
import random
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from papalote.core.dates import format_long_date_es, utc_now, utc_now_iso
from papalote.core.errors import ValidationError
from papalote.core.ids import timestamp_id
from papalote.domain.cart import CartItem
from papalote.domain.order import (
    AppliedCoupon,
    CompleteOrder,
    DEFERRED_PAYMENT_METHODS,
    OrderCoupon,
    OrderItem,
    OrderSummary,
    SavedAddress,
)
from papalote.repositories.address_repository import AddressRepository
from papalote.repositories.order_repository import OrderRepository
from papalote.services.cart_service import CartService
from papalote.services.coupon_service import CouponService
from papalote.services.validators import (
    validate_checkout_options,
    validate_payment_method,
    validate_shipping_address,
)


logger = logging.getLogger(__name__)

FREE_SHIPPING_THRESHOLD = 1000
BASE_SHIPPING = 150
REMOTE_SHIPPING_SURCHARGE = 50
GIFT_WRAP_COST = 50

REMOTE_STATES = (
    "Baja California",
    "Baja California Sur",
    "Chiapas",
    "Quintana Roo",
    "Yucatán",
    "Sonora",
    "Chihuahua",
)

DELIVERY_DAYS = 5
REMOTE_DELIVERY_DAYS = 7
DELIVERY_WINDOW_DAYS = 3


def generate_order_id(now: Optional[datetime] = None) -> str:
    """ORD-<base36 milliseconds>-<6 random>, upper-case (e.g., "ORD-M1D2QX-9TR4BN")"""
    return timestamp_id("ORD", 6, now)


def generate_order_number(now: Optional[datetime] = None) -> str:
    """PM<yy><mm>-<4 digits> (e.g., "PM2510-0427")"""
    now = now or utc_now()
    return f"PM{now:%y%m}-{random.randint(0, 9999):04d}"


def generate_address_id(now: Optional[datetime] = None) -> str:
    return timestamp_id("addr", 4, now, upper=False)


def calculate_shipping_cost(subtotal: float, state: Optional[str] = None) -> float:
    if subtotal >= FREE_SHIPPING_THRESHOLD:
        return 0
    if state and state in REMOTE_STATES:
        return BASE_SHIPPING + REMOTE_SHIPPING_SURCHARGE
    return BASE_SHIPPING


def calculate_estimated_delivery(state: str, today: Optional[date] = None) -> str:
    """
    Delivery window in long Spanish form

    Example:
        "lunes, 20 de octubre - jueves, 23 de octubre"
    """
    today = today or utc_now().date()
    base_days = REMOTE_DELIVERY_DAYS if state in REMOTE_STATES else DELIVERY_DAYS
    start = today + timedelta(days=base_days)
    end = today + timedelta(days=base_days + DELIVERY_WINDOW_DAYS)
    return f"{format_long_date_es(start)} - {format_long_date_es(end)}"


class CheckoutService:
    """
    Service for turning a session cart into an order

    Usage:
        service = CheckoutService(session_id)
        order = service.place_order(address, "card", accept_terms=True)
    """

    def __init__(
        self,
        session_id: str,
        cart: Optional[CartService] = None,
        order_repo: Optional[OrderRepository] = None,
        address_repo: Optional[AddressRepository] = None,
    ):
        self.cart = cart or CartService(session_id)
        self.orders = order_repo or OrderRepository()
        self.addresses = address_repo or AddressRepository()

    @staticmethod
    def _apply_coupon(code: Optional[str], subtotal: float, shipping_cost: float) -> Optional[AppliedCoupon]:
        if not code:
            return None
        return CouponService.apply(code, subtotal, shipping_cost)

    def summary(
        self,
        state: Optional[str] = None,
        coupon_code: Optional[str] = None,
        gift_wrap: bool = False,
    ) -> Dict[str, Any]:
        """
        Order summary for the current cart

        Returns:
            {"summary": OrderSummary dict, "coupon": AppliedCoupon dict or None}
        """
        items = self.cart.items()
        subtotal = sum(item.line_total for item in items)
        totals = self._totals(subtotal, state, coupon_code, gift_wrap)
        coupon = totals["coupon"]

        summary = OrderSummary(
            subtotal=subtotal,
            shipping_cost=totals["shipping_cost"],
            discount=totals["discount"],
            gift_wrap_fee=totals["gift_wrap_fee"],
            total=totals["total"],
            item_count=sum(item.quantity for item in items),
            free_shipping_threshold=FREE_SHIPPING_THRESHOLD,
            amount_to_free_shipping=max(0, FREE_SHIPPING_THRESHOLD - subtotal),
        )
        return {
            "summary": summary.to_dict(),
            "coupon": coupon.to_dict() if coupon else None,
        }

    def _totals(
        self,
        subtotal: float,
        state: Optional[str],
        coupon_code: Optional[str],
        gift_wrap: bool,
    ) -> Dict[str, Any]:
        base_shipping = calculate_shipping_cost(subtotal, state)
        coupon = self._apply_coupon(coupon_code, subtotal, base_shipping)

        is_free_shipping = coupon is not None and coupon.type == "free_shipping"
        shipping_cost = 0 if is_free_shipping else base_shipping
        discount = coupon.discount_amount if coupon and not is_free_shipping else 0
        gift_wrap_fee = GIFT_WRAP_COST if gift_wrap else 0

        return {
            "coupon": coupon,
            "shipping_cost": shipping_cost,
            "discount": discount,
            "gift_wrap_fee": gift_wrap_fee,
            "total": subtotal + shipping_cost + gift_wrap_fee - discount,
        }

    @staticmethod
    def _check_stock(items: List[CartItem]) -> None:
        if not items:
            raise ValidationError("Tu carrito está vacío")

        out_of_stock = [item.name for item in items if not item.in_stock]
        if out_of_stock:
            raise ValidationError(
                f"Algunos productos no están disponibles: {', '.join(out_of_stock)}"
            )

    def place_order(
        self,
        shipping_address: Dict[str, Any],
        payment_method: Optional[str],
        accept_terms: bool,
        save_address: bool = False,
        gift_wrap: bool = False,
        gift_message: Optional[str] = None,
        notes: Optional[str] = None,
        coupon_code: Optional[str] = None,
        user_id: Optional[str] = None,
        user_email: Optional[str] = None,
    ) -> CompleteOrder:
        """
        Validate the checkout form and create the order

        Args:
            shipping_address: camelCase address payload
            payment_method: card | mercadopago | oxxo | spei | paypal
            accept_terms: Must be True
            save_address: Also store the address as the buyer's default
            coupon_code: Optional coupon, re-validated against the cart
            user_id: Authenticated buyer, if any
            user_email: Authenticated buyer email; defaults to the address email

        Returns:
            The stored CompleteOrder

        Raises:
            ValidationError: invalid form, empty cart, out-of-stock items or coupon
        """
        address = validate_shipping_address(shipping_address)
        method = validate_payment_method(payment_method)
        validate_checkout_options(accept_terms, gift_message, notes)

        items = self.cart.items()
        self._check_stock(items)

        owner_email = user_email or address.email
        subtotal = sum(item.line_total for item in items)
        totals = self._totals(subtotal, address.state, coupon_code, gift_wrap)
        coupon = totals["coupon"]

        is_deferred = method in DEFERRED_PAYMENT_METHODS
        now = utc_now_iso()
        order = CompleteOrder(
            id=generate_order_id(),
            order_number=generate_order_number(),
            user_id=user_id,
            user_email=owner_email,
            status="pending" if is_deferred else "confirmed",
            items=[
                OrderItem(
                    id=item.id,
                    name=item.name,
                    quantity=item.quantity,
                    price=item.price,
                    images=item.images,
                    maker=item.maker,
                    state=item.state,
                )
                for item in items
            ],
            subtotal=subtotal,
            shipping_cost=totals["shipping_cost"],
            discount=totals["discount"],
            gift_wrap_fee=totals["gift_wrap_fee"],
            total=totals["total"],
            shipping_address=address,
            payment_method=method,
            payment_status="pending" if is_deferred else "completed",
            gift_wrap=gift_wrap,
            gift_message=gift_message or None,
            coupon=OrderCoupon(
                code=coupon.code,
                type=coupon.type,
                value=coupon.value,
                discount_amount=coupon.discount_amount,
            ) if coupon else None,
            notes=notes or None,
            created_at=now,
            updated_at=now,
            estimated_delivery=calculate_estimated_delivery(address.state),
        )

        self.orders.save(order)
        if save_address:
            self.addresses.save(owner_email, SavedAddress(
                **address.model_dump(),
                id=generate_address_id(),
                is_default=True,
                label="Casa",
            ))
        self.cart.clear()

        logger.info(
            f"Order created: {order.id} ({order.order_number}) "
            f"total={order.total} payment={method} status={order.status}"
        )
        return order
