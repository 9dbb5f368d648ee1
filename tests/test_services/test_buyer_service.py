"""
Unit tests for BuyerService (orders, addresses, favorites, achievements, impact)
"""
import pytest

from papalote.core.errors import NotFoundError
from papalote.services.buyer_service import BuyerService
from papalote.services.settings_service import SettingsService

JUAN = "juan@ejemplo.com"


class TestBuyerOrders:

    def test_orders_for_email_is_case_insensitive(self):
        orders = BuyerService().orders_for("JUAN@ejemplo.com")

        assert {o.id for o in orders} == {"ORD-M0B7TQ-2PLX9D", "ORD-LZ3K9A-7HQ2XW"}

    def test_get_order_by_number(self):
        order = BuyerService().get_order("PM2509-1024", email=JUAN)

        assert order.id == "ORD-LZ3K9A-7HQ2XW"

    def test_get_order_of_another_buyer_is_not_found(self):
        with pytest.raises(NotFoundError):
            BuyerService().get_order("ORD-M1D2QX-9TR4BN", email=JUAN)


class TestBuyerAddresses:

    def test_new_default_replaces_previous(self, shipping_address):
        # Arrange
        service = BuyerService()
        first = service.save_address(JUAN, {**shipping_address, "isDefault": True, "label": "Casa"})

        # Act
        second = service.save_address(JUAN, {**shipping_address, "isDefault": True, "label": "Oficina"})

        # Assert
        assert first.id != second.id
        assert service.default_address(JUAN).label == "Oficina"
        assert [a.is_default for a in service.list_addresses(JUAN)] == [False, True]

    def test_delete_unknown_address(self):
        with pytest.raises(NotFoundError):
            BuyerService().delete_address(JUAN, "addr-nope")

    def test_default_address_is_none_without_addresses(self):
        assert BuyerService().default_address("nadie@ejemplo.com") is None


class TestBuyerFavorites:

    def test_add_is_idempotent(self):
        # Arrange
        service = BuyerService()

        # Act
        service.add_favorite(JUAN, "5")

        # Assert
        assert [f.product_id for f in service.list_favorites(JUAN)] == ["5", "16"]

    def test_add_and_remove(self):
        service = BuyerService()

        favorite = service.add_favorite(JUAN, "7")
        assert favorite.name == "Aretes de Filigrana"
        assert service.is_favorite(JUAN, "7")

        assert service.remove_favorite(JUAN, "7") is True
        assert not service.is_favorite(JUAN, "7")

    def test_unknown_product(self):
        with pytest.raises(NotFoundError):
            BuyerService().add_favorite(JUAN, "999")


class TestBuyerAchievements:

    def test_metrics(self):
        metrics = BuyerService().metrics(JUAN, "Juan Pérez")

        assert metrics.orders_count == 2
        assert metrics.artisans_count == 3
        assert metrics.states_count == 2
        assert metrics.favorites_count == 2
        assert metrics.reviews_count == 3
        assert metrics.categories_count == 3

    def test_achievements_progress(self):
        # Act
        result = BuyerService().achievements(JUAN, "Juan Pérez")

        # Assert
        by_id = {a["id"]: a for a in result["achievements"]}
        assert by_id["b-first-purchase"]["unlocked"] is True
        assert by_id["b-states-3"]["unlocked"] is False
        assert by_id["b-states-3"]["progress"] == 2
        assert result["unlockedCount"] == 4
        assert result["totalPoints"] == 45


class TestBuyerImpact:

    def test_impact_with_default_commission(self):
        impact = BuyerService().impact(JUAN)

        assert impact.total_spent == 4652
        assert impact.orders_count == 2
        assert impact.items_count == 4
        assert impact.artisans_supported == 3
        assert impact.states_reached == 2
        assert impact.amount_to_artisans == 4279.84
        assert impact.platform_commission == 372.16

    def test_impact_follows_commission_setting(self):
        # Arrange
        SettingsService().save_section("payments", {"platformCommission": 10})

        # Act
        impact = BuyerService().impact(JUAN)

        # Assert
        assert impact.amount_to_artisans == 4186.8
