"""
Seller API Endpoints
Seller dashboard: listings, order inbox, analytics, reviews, messages and tasks

Sellers act on their own data; admins may pass any sellerId. Listing
endpoints require sellerId; the rest default to the signed-in seller.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from papalote.api.deps import check_seller_access, resolve_seller_id
from papalote.core.auth import TokenUser, require_seller
from papalote.core.errors import PapaloteError, ok
from papalote.domain.base import CamelModel
from papalote.services.seller_order_service import SellerOrderService
from papalote.services.seller_product_service import SellerProductService
from papalote.services.seller_service import SellerService


logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class ProductPayload(CamelModel):
    seller_id: Optional[str] = None
    product: Optional[Dict[str, Any]] = None


class SeenOrdersRequest(CamelModel):
    order_ids: List[str]


class OrderStatusUpdate(CamelModel):
    status: str
    tracking: Optional[str] = None


class ReviewResponseRequest(CamelModel):
    text: str


class MessageReplyRequest(CamelModel):
    message: str


def _shop_name(seller_id: str) -> str:
    return SellerService().get_shop(seller_id).name


# =============================================================================
# Listings
# =============================================================================

@router.get("/products")
async def list_seller_products(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    product_status: Optional[str] = Query(None, alias="status", description="draft|published|all"),
    user: TokenUser = Depends(require_seller),
):
    seller_id = check_seller_access(seller_id, user)
    products = SellerProductService().list_products(seller_id, product_status)
    return ok([p.to_dict() for p in products], total=len(products))


@router.get("/products/counts")
async def get_product_counts(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    """Number of drafts and published listings"""
    return ok(SellerProductService().counts(check_seller_access(seller_id, user)))


@router.get("/products/{product_id}")
async def get_seller_product(
    product_id: str,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    product = SellerProductService().get_product(product_id, check_seller_access(seller_id, user))
    return ok(product.to_dict())


@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_seller_product(payload: ProductPayload, user: TokenUser = Depends(require_seller)):
    """
    Create a listing

    Listings are published unless the product carries status "draft".
    The seller name is taken from the seller's shop.
    """
    try:
        seller_id = check_seller_access(payload.seller_id, user)
        shop = SellerService().shops.find_by_owner(seller_id) if seller_id else None
        seller_name = shop.name if shop else (user.name if seller_id == user.id else None)

        product = SellerProductService().create(seller_id, payload.product, seller_name)
        return ok(product.to_dict(), message="Producto guardado")

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error creating seller product: {e}")
        raise HTTPException(status_code=500, detail="No se pudo guardar el producto")


@router.put("/products")
async def update_seller_product(payload: ProductPayload, user: TokenUser = Depends(require_seller)):
    seller_id = check_seller_access(payload.seller_id, user)
    product = SellerProductService().update(seller_id, payload.product)
    return ok(product.to_dict(), message="Producto actualizado")


@router.delete("/products")
async def delete_seller_product(
    product_id: Optional[str] = Query(None, alias="productId"),
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    SellerProductService().delete(product_id, check_seller_access(seller_id, user))
    return ok(None, message="Producto eliminado")


@router.post("/products/{product_id}/publish")
async def publish_seller_product(
    product_id: str,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    product = SellerProductService().publish(product_id, check_seller_access(seller_id, user))
    return ok(product.to_dict(), message="Producto publicado")


@router.post("/products/{product_id}/unpublish")
async def unpublish_seller_product(
    product_id: str,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    product = SellerProductService().unpublish(product_id, check_seller_access(seller_id, user))
    return ok(product.to_dict(), message="Producto movido a borradores")


# =============================================================================
# Order inbox
# =============================================================================

@router.get("/orders")
async def get_seller_orders(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    """Orders containing the seller's items, with new ones flagged"""
    shop_name = _shop_name(resolve_seller_id(seller_id, user))
    return ok(SellerOrderService().inbox(shop_name))


@router.get("/orders/new")
async def get_new_orders(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    shop_name = _shop_name(resolve_seller_id(seller_id, user))
    service = SellerOrderService()
    orders = service.new_orders(shop_name)
    return ok([service.seller_view(o, shop_name) for o in orders], total=len(orders))


@router.post("/orders/seen")
async def mark_orders_seen(
    payload: SeenOrdersRequest,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    shop_name = _shop_name(resolve_seller_id(seller_id, user))
    return ok(SellerOrderService().mark_seen(shop_name, payload.order_ids))


@router.post("/orders/seen-all")
async def mark_all_orders_seen(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    shop_name = _shop_name(resolve_seller_id(seller_id, user))
    return ok(SellerOrderService().mark_all_seen(shop_name))


@router.patch("/orders/{order_id}/status")
async def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    """Move an order through its lifecycle; only orders with the seller's items"""
    shop_name = _shop_name(resolve_seller_id(seller_id, user))
    service = SellerOrderService()
    if order_id not in {o.id for o in service.orders_for_seller(shop_name)}:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pedido no encontrado: {order_id}"
        )

    order = service.update_status(order_id, payload.status, payload.tracking)
    return ok(service.seller_view(order, shop_name), message="Estado del pedido actualizado")


# =============================================================================
# Dashboard
# =============================================================================

@router.get("/analytics")
async def get_analytics(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    return ok(SellerService().analytics(resolve_seller_id(seller_id, user)))


@router.get("/reviews")
async def get_reviews(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    """Reviews of the seller's products with average rating"""
    return ok(SellerService().reviews_summary(resolve_seller_id(seller_id, user)))


@router.post("/reviews/{review_id}/response")
async def respond_to_review(
    review_id: str,
    payload: ReviewResponseRequest,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    review = SellerService().respond_to_review(resolve_seller_id(seller_id, user), review_id, payload.text)
    return ok(review.to_dict(), message="Respuesta publicada")


@router.get("/messages")
async def get_messages(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    return ok(SellerService().messages_summary(resolve_seller_id(seller_id, user)))


@router.post("/messages/{message_id}/read")
async def mark_message_read(
    message_id: str,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    message = SellerService().mark_message_read(resolve_seller_id(seller_id, user), message_id)
    return ok(message.to_dict())


@router.post("/messages/{message_id}/reply")
async def reply_to_message(
    message_id: str,
    payload: MessageReplyRequest,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    message = SellerService().reply_to_message(resolve_seller_id(seller_id, user), message_id, payload.message)
    return ok(message.to_dict(), message="Respuesta enviada")


@router.get("/tasks")
async def get_tasks(
    seller_id: Optional[str] = Query(None, alias="sellerId"),
    user: TokenUser = Depends(require_seller),
):
    """Pending work sorted by priority (critical first)"""
    tasks = SellerService().tasks(resolve_seller_id(seller_id, user))
    return ok([t.to_dict() for t in tasks], total=len(tasks))
