"""
Coupon Service - discount codes applied at checkout

Available codes:
    PRIMERA10    10% off, minimum 500, capped at 500
    ENVIOGRATIS  free shipping, minimum 300
    ARTESANO20   20% off, minimum 1000, capped at 1000
    DESCUENTO50  50 MXN off, minimum 400
    EXPIRED2023  expired on 2023-01-01
"""
from typing import Dict, List, Optional

from papalote.core.dates import parse_iso, utc_now
from papalote.core.errors import ValidationError
from papalote.domain.order import AppliedCoupon, Coupon
from papalote.services.pricing_service import round_money


AVAILABLE_COUPONS: List[Coupon] = [
    Coupon(
        code="PRIMERA10",
        type="percentage",
        value=10,
        description="10% de descuento en tu primera compra",
        min_purchase=500,
        max_discount=500,
    ),
    Coupon(
        code="ENVIOGRATIS",
        type="free_shipping",
        value=0,
        description="Envío gratis en tu pedido",
        min_purchase=300,
    ),
    Coupon(
        code="ARTESANO20",
        type="percentage",
        value=20,
        description="20% de descuento",
        min_purchase=1000,
        max_discount=1000,
    ),
    Coupon(
        code="DESCUENTO50",
        type="fixed",
        value=50,
        description="$50 MXN de descuento",
        min_purchase=400,
    ),
    Coupon(
        code="EXPIRED2023",
        type="percentage",
        value=15,
        description="Cupón expirado",
        expires_at="2023-01-01",
    ),
]

COUPONS_BY_CODE: Dict[str, Coupon] = {coupon.code: coupon for coupon in AVAILABLE_COUPONS}


def _format_amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class CouponService:
    """
    Validates coupon codes and computes their discounts

    Usage:
        applied = CouponService.apply("primera10", subtotal=800, shipping_cost=150)
        applied.discount_amount  # 80.0
    """

    @staticmethod
    def validate(code: str, subtotal: float) -> Coupon:
        """
        Look up a code and check it can be used for this subtotal

        Codes are trimmed and upper-cased first.

        Raises:
            ValidationError: with a buyer-facing Spanish message
        """
        normalized = (code or "").strip().upper()
        if not normalized:
            raise ValidationError("Ingresa un código de cupón")

        coupon = COUPONS_BY_CODE.get(normalized)
        if coupon is None:
            raise ValidationError("Cupón no válido o expirado")

        if coupon.expires_at and utc_now() > parse_iso(coupon.expires_at):
            raise ValidationError("Este cupón ha expirado")

        if coupon.min_purchase and subtotal < coupon.min_purchase:
            raise ValidationError(
                f"Este cupón requiere una compra mínima de ${_format_amount(coupon.min_purchase)} MXN"
            )

        return coupon

    @staticmethod
    def calculate_discount(coupon: Coupon, subtotal: float, shipping_cost: float) -> float:
        """
        Discount granted by a valid coupon

        - percentage: subtotal * value / 100, capped at max_discount
        - free_shipping: the shipping cost
        - fixed: value, never more than the subtotal
        """
        if coupon.type == "percentage":
            discount = subtotal * coupon.value / 100
            if coupon.max_discount:
                discount = min(discount, coupon.max_discount)
            return round_money(discount)

        if coupon.type == "free_shipping":
            return shipping_cost

        if coupon.type == "fixed":
            return min(coupon.value, subtotal)

        return 0

    @classmethod
    def apply(cls, code: str, subtotal: float, shipping_cost: float) -> AppliedCoupon:
        coupon = cls.validate(code, subtotal)
        discount = cls.calculate_discount(coupon, subtotal, shipping_cost)
        return AppliedCoupon(**coupon.model_dump(), discount_amount=discount)

    @staticmethod
    def display_text(coupon: Coupon) -> str:
        """Short label shown next to an applied coupon"""
        if coupon.type == "percentage":
            return f"{_format_amount(coupon.value)}% de descuento"
        if coupon.type == "free_shipping":
            return "Envío gratis"
        if coupon.type == "fixed":
            return f"${_format_amount(coupon.value)} MXN de descuento"
        return coupon.description

    @staticmethod
    def find(code: str) -> Optional[Coupon]:
        return COUPONS_BY_CODE.get((code or "").strip().upper())
