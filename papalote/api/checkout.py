"""
Checkout API Endpoints
Coupons, shipping quotes, order summary and order placement
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from papalote.api.deps import get_session_id
from papalote.core.auth import TokenUser, get_current_user_optional
from papalote.core.errors import PapaloteError, ok
from papalote.domain.base import CamelModel
from papalote.services.cart_service import CartService
from papalote.services.checkout_service import (
    CheckoutService,
    FREE_SHIPPING_THRESHOLD,
    GIFT_WRAP_COST,
    calculate_estimated_delivery,
    calculate_shipping_cost,
)
from papalote.services.coupon_service import CouponService


logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class CouponRequest(CamelModel):
    code: str = ""
    state: Optional[str] = None


class SummaryRequest(CamelModel):
    state: Optional[str] = None
    coupon_code: Optional[str] = None
    gift_wrap: bool = False


class PlaceOrderRequest(CamelModel):
    # Address is validated field by field by the checkout rules
    shipping_address: Dict[str, Any]
    payment_method: Optional[str] = None
    save_address: bool = False
    accept_terms: bool = False
    gift_wrap: bool = False
    gift_message: Optional[str] = None
    notes: Optional[str] = None
    coupon_code: Optional[str] = None


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/shipping")
async def get_shipping_quote(
    subtotal: float = Query(..., ge=0),
    state: Optional[str] = Query(None),
):
    """Shipping cost and delivery window for a subtotal and destination state"""
    return ok({
        "shippingCost": calculate_shipping_cost(subtotal, state),
        "freeShippingThreshold": FREE_SHIPPING_THRESHOLD,
        "amountToFreeShipping": max(0, FREE_SHIPPING_THRESHOLD - subtotal),
        "estimatedDelivery": calculate_estimated_delivery(state or "Ciudad de México"),
        "giftWrapCost": GIFT_WRAP_COST,
    })


@router.post("/coupon")
async def apply_coupon(payload: CouponRequest, session_id: str = Depends(get_session_id)):
    """Validate a coupon against the current cart"""
    subtotal = CartService(session_id).total()
    shipping_cost = calculate_shipping_cost(subtotal, payload.state)
    applied = CouponService.apply(payload.code, subtotal, shipping_cost)

    data = applied.to_dict()
    data["displayText"] = CouponService.display_text(applied)
    return ok(data, message="Cupón aplicado")


@router.post("/summary")
async def get_summary(payload: SummaryRequest, session_id: str = Depends(get_session_id)):
    """Totals for the current cart with optional coupon and gift wrap"""
    return ok(CheckoutService(session_id).summary(payload.state, payload.coupon_code, payload.gift_wrap))


@router.post("/orders", status_code=status.HTTP_201_CREATED)
async def place_order(
    payload: PlaceOrderRequest,
    session_id: str = Depends(get_session_id),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    """
    Place an order from the current cart

    Guests can check out; signed-in buyers get the order linked to their
    account. The cart is emptied on success.
    """
    try:
        order = CheckoutService(session_id).place_order(
            shipping_address=payload.shipping_address,
            payment_method=payload.payment_method,
            accept_terms=payload.accept_terms,
            save_address=payload.save_address,
            gift_wrap=payload.gift_wrap,
            gift_message=payload.gift_message,
            notes=payload.notes,
            coupon_code=payload.coupon_code,
            user_id=user.id if user else None,
            user_email=user.email if user else None,
        )
        return ok(order.to_dict(), message="Pedido creado exitosamente")

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error placing order: {e}")
        raise HTTPException(status_code=500, detail="No se pudo crear el pedido")
