"""
Cart API Endpoints
Shopping cart of the visitor session (papalote_session cookie)
"""
from fastapi import APIRouter, Depends
from pydantic import Field

from papalote.api.deps import get_session_id
from papalote.core.errors import ok
from papalote.domain.base import CamelModel
from papalote.services.cart_service import CartService


router = APIRouter()


class CartItemAdd(CamelModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class CartItemUpdate(CamelModel):
    quantity: int


@router.get("")
async def get_cart(session_id: str = Depends(get_session_id)):
    """Cart lines with count (units) and total (MXN)"""
    return ok(CartService(session_id).summary())


@router.post("/items")
async def add_item(payload: CartItemAdd, session_id: str = Depends(get_session_id)):
    """Add a product; adding one already in the cart increases its quantity"""
    cart = CartService(session_id)
    cart.add(payload.product_id, payload.quantity)
    return ok(cart.summary(), message="Producto agregado al carrito")


@router.patch("/items/{product_id}")
async def update_item(product_id: str, payload: CartItemUpdate, session_id: str = Depends(get_session_id)):
    """Set a line's quantity; 0 or less removes it"""
    cart = CartService(session_id)
    cart.update_quantity(product_id, payload.quantity)
    return ok(cart.summary())


@router.delete("/items/{product_id}")
async def remove_item(product_id: str, session_id: str = Depends(get_session_id)):
    cart = CartService(session_id)
    cart.remove(product_id)
    return ok(cart.summary())


@router.get("/items/{product_id}")
async def is_in_cart(product_id: str, session_id: str = Depends(get_session_id)):
    return ok({"productId": product_id, "inCart": CartService(session_id).is_in_cart(product_id)})


@router.delete("")
async def clear_cart(session_id: str = Depends(get_session_id)):
    cart = CartService(session_id)
    cart.clear()
    return ok(cart.summary())
