"""
Seller Product Service - listings managed from the seller dashboard

A listing is either a draft or published. New listings are published
unless the form says otherwise; sellers can unpublish back to draft.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.core.ids import timestamp_id
from papalote.domain.seller import SellerProduct
from papalote.repositories.seller_product_repository import SellerProductRepository


logger = logging.getLogger(__name__)

DEFAULT_SELLER_NAME = "Vendedor"
STATUS_FILTERS = ("draft", "published", "all")


def generate_product_id() -> str:
    """PROD-<base36 ms>-<6 random>, upper-case"""
    return timestamp_id("PROD", 6)


def _require_seller(seller_id: Optional[str]) -> str:
    if not seller_id:
        raise ValidationError("sellerId is required")
    return str(seller_id)


def _build(data: Dict[str, Any]) -> SellerProduct:
    try:
        return SellerProduct.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Producto inválido ({field}): {first['msg']}")


class SellerProductService:
    """
    Service for seller listings

    Usage:
        service = SellerProductService()
        product = service.create("3", {"name": "Huipil", "price": 1200, "category": "Textiles"})
    """

    def __init__(self, repo: Optional[SellerProductRepository] = None):
        self.repo = repo or SellerProductRepository()

    def list_products(self, seller_id: Optional[str], status: Optional[str] = None) -> List[SellerProduct]:
        """
        List a seller's listings

        Args:
            seller_id: Seller ID (required)
            status: "draft", "published" or "all" (default)

        Raises:
            ValidationError: if seller_id is missing or status is unknown
        """
        seller_id = _require_seller(seller_id)
        status = status or "all"
        if status not in STATUS_FILTERS:
            raise ValidationError(f"Estado inválido: {status}. Usa draft, published o all")

        return self.repo.find_by_seller(seller_id, None if status == "all" else status)

    def get_product(self, product_id: str, seller_id: Optional[str]) -> SellerProduct:
        seller_id = _require_seller(seller_id)
        product = self.repo.find_by_id(product_id)
        if product is None or product.seller_id != seller_id:
            raise NotFoundError(f"Producto no encontrado: {product_id}")
        return product

    def create(
        self,
        seller_id: Optional[str],
        product: Optional[Dict[str, Any]],
        seller_name: Optional[str] = None,
    ) -> SellerProduct:
        """
        Create a listing

        The ID is generated unless the form carries one; status defaults
        to published and createdAt is kept when given.

        Raises:
            ValidationError: if seller_id or product is missing or invalid
        """
        if not product or not seller_id:
            raise ValidationError("product and sellerId are required")

        now = utc_now_iso()
        data = dict(product)
        data.update({
            "id": product.get("id") or generate_product_id(),
            "sellerId": str(seller_id),
            "sellerName": seller_name or DEFAULT_SELLER_NAME,
            "createdAt": product.get("createdAt") or now,
            "updatedAt": now,
            "status": product.get("status") or "published",
        })

        created = self.repo.save(_build(data))
        logger.info(f"Seller product created: {created.id} ({created.status}) by seller {seller_id}")
        return created

    def update(self, seller_id: Optional[str], product: Optional[Dict[str, Any]]) -> SellerProduct:
        """
        Update a listing; fields not sent keep their value

        Raises:
            ValidationError: if seller_id or product.id is missing
            NotFoundError: if the seller has no such listing
        """
        if not product or not product.get("id") or not seller_id:
            raise ValidationError("product.id and sellerId are required")

        existing = self.get_product(product["id"], seller_id)
        data = existing.to_dict()
        data.update(product)
        data.update({
            "sellerId": existing.seller_id,
            "createdAt": existing.created_at,
            "updatedAt": utc_now_iso(),
        })

        updated = self.repo.save(_build(data))
        logger.info(f"Seller product updated: {updated.id}")
        return updated

    def delete(self, product_id: Optional[str], seller_id: Optional[str]) -> None:
        if not product_id or not seller_id:
            raise ValidationError("productId and sellerId are required")
        if not self.repo.delete(product_id, str(seller_id)):
            raise NotFoundError(f"Producto no encontrado: {product_id}")
        logger.info(f"Seller product deleted: {product_id}")

    def _set_status(self, product_id: str, seller_id: str, current: str, target: str) -> SellerProduct:
        product = self.get_product(product_id, seller_id)
        if product.status != current:
            label = "borrador" if current == "draft" else "producto publicado"
            raise NotFoundError(f"No se encontró el {label}: {product_id}")

        changed = product.model_copy(update={"status": target, "updated_at": utc_now_iso()})
        self.repo.save(changed)
        logger.info(f"Seller product {product_id}: {current} -> {target}")
        return changed

    def publish(self, product_id: str, seller_id: str) -> SellerProduct:
        """Publish a draft"""
        return self._set_status(product_id, seller_id, "draft", "published")

    def unpublish(self, product_id: str, seller_id: str) -> SellerProduct:
        """Move a published listing back to draft"""
        return self._set_status(product_id, seller_id, "published", "draft")

    def counts(self, seller_id: Optional[str]) -> Dict[str, int]:
        seller_id = _require_seller(seller_id)
        return {
            "drafts": len(self.repo.find_by_seller(seller_id, "draft")),
            "published": len(self.repo.find_by_seller(seller_id, "published")),
        }
