"""
Shops API Endpoints
Maker shop directory and shop pages
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from papalote.core.errors import NotFoundError, PapaloteError, ok
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.review_repository import ReviewRepository
from papalote.repositories.shop_repository import ShopRepository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_shops(state: Optional[str] = Query(None, description="Filter by Mexican state")):
    shops = ShopRepository().find_all(state=state)
    return ok([shop.to_dict() for shop in shops], total=len(shops))


@router.get("/{shop_id}")
async def get_shop(shop_id: str):
    """
    Shop page: profile, products and reviews summary

    Returns 404 for unknown shops.
    """
    try:
        shop = ShopRepository().find_by_id(shop_id)
        if shop is None:
            raise NotFoundError(f"Tienda no encontrada: {shop_id}")

        products = ProductRepository().find_by_shop(shop.id)
        reviews = ReviewRepository().find_by_shop(shop.id)
        average = round(sum(r.rating for r in reviews) / len(reviews), 1) if reviews else 0

        return ok({
            "shop": shop.to_dict(),
            "products": [p.to_dict() for p in products],
            "reviews": {
                "total": len(reviews),
                "averageRating": average,
                "items": [r.to_dict() for r in reviews],
            },
        })

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error fetching shop {shop_id}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener la tienda")
