"""
Unit tests for SellerProductService
"""
import pytest

from papalote.core.errors import NotFoundError, ValidationError
from papalote.services.seller_product_service import SellerProductService

DRAFT_ID = "PROD-MG8Z1K-A4X9QD"
PUBLISHED_ID = "PROD-MF2Y7C-K8W3LP"


class TestSellerProductListing:

    def test_list_all_newest_first(self):
        products = SellerProductService().list_products("3")

        assert [p.id for p in products] == [DRAFT_ID, PUBLISHED_ID]

    def test_list_by_status(self):
        drafts = SellerProductService().list_products("3", "draft")

        assert [p.id for p in drafts] == [DRAFT_ID]

    def test_seller_id_is_required(self):
        with pytest.raises(ValidationError, match="sellerId is required"):
            SellerProductService().list_products(None)

    def test_unknown_status_filter(self):
        with pytest.raises(ValidationError):
            SellerProductService().list_products("3", "archived")

    def test_counts(self):
        assert SellerProductService().counts("3") == {"drafts": 1, "published": 1}


class TestSellerProductChanges:

    def test_create_defaults_to_published(self):
        # Arrange
        service = SellerProductService()
        form = {"name": "Morral de Lana", "price": 350, "category": "Textiles y Ropa"}

        # Act
        product = service.create("3", form, seller_name="Tejidos Sofía")

        # Assert
        assert product.id.startswith("PROD-")
        assert product.status == "published"
        assert product.seller_name == "Tejidos Sofía"
        assert service.counts("3")["published"] == 2

    def test_create_requires_product(self):
        with pytest.raises(ValidationError, match="product and sellerId are required"):
            SellerProductService().create("3", None)

    def test_create_rejects_invalid_price(self):
        form = {"name": "Morral", "price": -10, "category": "Textiles y Ropa"}

        with pytest.raises(ValidationError, match="Producto inválido"):
            SellerProductService().create("3", form)

    def test_update_keeps_fields_not_sent(self):
        # Act
        updated = SellerProductService().update("3", {"id": DRAFT_ID, "price": 990})

        # Assert
        assert updated.price == 990
        assert updated.name == "Camino de Mesa Zapoteco"
        assert updated.status == "draft"

    def test_update_of_other_sellers_listing_is_not_found(self):
        with pytest.raises(NotFoundError):
            SellerProductService().update("4", {"id": DRAFT_ID, "price": 990})

    def test_publish_draft(self):
        service = SellerProductService()

        published = service.publish(DRAFT_ID, "3")

        assert published.status == "published"
        assert service.counts("3") == {"drafts": 0, "published": 2}

    def test_publish_without_seller_fails(self):
        with pytest.raises(ValidationError, match="sellerId is required"):
            SellerProductService().publish(DRAFT_ID, None)

        assert SellerProductService().counts("3") == {"drafts": 1, "published": 1}

    def test_publish_already_published_fails(self):
        with pytest.raises(NotFoundError):
            SellerProductService().publish(PUBLISHED_ID, "3")

    def test_unpublish(self):
        product = SellerProductService().unpublish(PUBLISHED_ID, "3")

        assert product.status == "draft"

    def test_delete_only_own_listing(self):
        service = SellerProductService()

        with pytest.raises(NotFoundError):
            service.delete(DRAFT_ID, "4")

        service.delete(DRAFT_ID, "3")
        assert service.counts("3")["drafts"] == 0
