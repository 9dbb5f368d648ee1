"""
Favorites API Endpoints
Buyer favorites keyed by email (the signed-in user's email when omitted)
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from papalote.api.deps import resolve_email
from papalote.core.auth import TokenUser, get_current_user_optional
from papalote.core.errors import ok
from papalote.domain.base import CamelModel
from papalote.services.buyer_service import BuyerService


router = APIRouter()


class FavoriteRequest(CamelModel):
    product_id: str
    email: Optional[str] = None


@router.get("")
async def list_favorites(
    email: Optional[str] = Query(None),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    favorites = BuyerService().list_favorites(resolve_email(email, user))
    return ok([f.to_dict() for f in favorites], total=len(favorites))


@router.post("")
async def add_favorite(
    payload: FavoriteRequest,
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    """Add a product to favorites; adding it twice keeps the original entry"""
    favorite = BuyerService().add_favorite(resolve_email(payload.email, user), payload.product_id)
    return ok(favorite.to_dict(), message="Agregado a favoritos")


@router.delete("")
async def remove_favorite(
    product_id: str = Query(..., alias="productId"),
    email: Optional[str] = Query(None),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    removed = BuyerService().remove_favorite(resolve_email(email, user), product_id)
    return ok({"productId": product_id, "removed": removed})


@router.get("/check")
async def check_favorite(
    product_id: str = Query(..., alias="productId"),
    email: Optional[str] = Query(None),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    is_favorite = BuyerService().is_favorite(resolve_email(email, user), product_id)
    return ok({"productId": product_id, "isFavorite": is_favorite})
