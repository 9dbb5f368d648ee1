"""
Order Domain Models

Represents checkout and order-related entities in Papalote Market.
These are the single source of truth for order data structure.
"""
from typing import List, Literal, Optional

from pydantic import Field

from papalote.domain.base import CamelModel


OrderStatus = Literal["pending", "confirmed", "processing", "shipped", "delivered", "cancelled"]
PaymentMethod = Literal["card", "mercadopago", "oxxo", "spei", "paypal"]
PaymentStatus = Literal["pending", "processing", "completed", "failed"]
CouponType = Literal["percentage", "free_shipping", "fixed"]

ORDER_STATUSES = ("pending", "confirmed", "processing", "shipped", "delivered", "cancelled")
PAYMENT_METHODS = ("card", "mercadopago", "oxxo", "spei", "paypal")

# Payment methods settled outside the checkout (cash at OXXO, bank transfer)
DEFERRED_PAYMENT_METHODS = ("oxxo", "spei")


class OrderItem(CamelModel):
    """
    Order line - product snapshot at order time

    Fields:
        id: Product ID
        name: Product name at order time
        quantity: Units ordered
        price: Unit price at order time
        maker: Maker/shop name (used to route the order to sellers)
        state: Mexican state of origin
    """
    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    price: float = Field(..., description="Price per unit", ge=0)
    images: List[str] = Field(default_factory=list)
    maker: str = Field(..., description="Maker/shop name")
    state: Optional[str] = Field(None, description="State of origin")

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class ShippingAddress(CamelModel):
    """Mexican shipping address (validated by services.validators)"""
    first_name: str
    last_name: str
    email: str
    phone: str
    street: str
    street_number: str
    apartment: Optional[str] = None
    neighborhood: str  # Colonia
    city: str
    state: str
    postal_code: str
    references: Optional[str] = None


class SavedAddress(ShippingAddress):
    id: str
    is_default: bool = False
    label: Optional[str] = None  # e.g., "Casa", "Oficina"


class OrderCoupon(CamelModel):
    """Applied coupon info saved with the order"""
    code: str
    type: CouponType
    value: float
    discount_amount: float


class CompleteOrder(CamelModel):
    """
    Complete order with all checkout info

    Totals:
        total = subtotal + shipping_cost + gift_wrap_fee - discount
    """
    id: str
    order_number: str
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    status: OrderStatus
    items: List[OrderItem]
    subtotal: float
    shipping_cost: float
    discount: float = 0
    gift_wrap_fee: float = 0
    total: float
    shipping_address: ShippingAddress
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    gift_wrap: bool = False
    gift_message: Optional[str] = None
    coupon: Optional[OrderCoupon] = None
    notes: Optional[str] = None
    created_at: str
    updated_at: str
    estimated_delivery: str
    tracking: Optional[str] = None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


class Coupon(CamelModel):
    code: str
    type: CouponType
    value: float  # percentage (0-100) or fixed amount
    description: str
    min_purchase: Optional[float] = None
    max_discount: Optional[float] = None
    expires_at: Optional[str] = None


class AppliedCoupon(Coupon):
    discount_amount: float


class OrderSummary(CamelModel):
    """Order summary for display (cart and checkout)"""
    subtotal: float
    shipping_cost: float
    discount: float
    gift_wrap_fee: float
    total: float
    item_count: int
    free_shipping_threshold: float
    amount_to_free_shipping: float
