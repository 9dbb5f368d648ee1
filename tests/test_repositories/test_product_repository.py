"""
Unit tests for ProductRepository and ShopRepository
"""
from papalote.core.storage import get_store
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.shop_repository import ShopRepository


class TestProductRepository:

    def test_find_all_keeps_fixture_order(self):
        products = ProductRepository().find_all()

        assert len(products) == 16
        assert [p.id for p in products[:3]] == ["1", "2", "3"]

    def test_find_by_id_accepts_any_id_type(self):
        repo = ProductRepository()

        assert repo.find_by_id("7").name == "Aretes de Filigrana"
        assert repo.find_by_id(7).id == "7"
        assert repo.find_by_id("999") is None

    def test_find_by_ids_keeps_requested_order_and_skips_unknown(self):
        products = ProductRepository().find_by_ids(["8", "999", "1"])

        assert [p.id for p in products] == ["8", "1"]

    def test_find_by_maker_is_case_insensitive(self):
        products = ProductRepository().find_by_maker("tejidos sofía")

        assert {p.id for p in products} == {"1", "2", "13"}

    def test_out_of_stock_product(self):
        product = ProductRepository().find_by_id("4")

        assert product.in_stock is False
        assert product.stock == 0

    def test_missing_stock_defaults_to_zero(self):
        # Arrange
        row = get_store().products[0]
        del row["stock"]

        # Act
        product = ProductRepository().find_by_id(row["id"])

        # Assert
        assert product.stock == 0
        assert product.in_stock is True


class TestShopRepository:

    def test_filter_by_state(self):
        repo = ShopRepository()

        assert len(repo.find_all()) == 5
        assert {s.id for s in repo.find_all(state="oaxaca")} == {"shop_001", "shop_002"}

    def test_find_by_owner(self):
        repo = ShopRepository()

        assert repo.find_by_owner("3").id == "shop_001"
        assert repo.find_by_owner("1") is None
