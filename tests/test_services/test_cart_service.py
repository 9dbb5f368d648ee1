"""
Unit tests for CartService
"""
import pytest

from papalote.core.errors import NotFoundError, ValidationError
from papalote.services.cart_service import CartService


class TestCartService:
    """Test the session cart"""

    def test_add_merges_quantity_for_same_product(self):
        # Arrange
        cart = CartService("cart-session")

        # Act
        cart.add("1", quantity=1)
        items = cart.add("1", quantity=2)

        # Assert
        assert len(items) == 1
        assert items[0].id == "1"
        assert items[0].quantity == 3

    def test_count_and_total(self):
        # Arrange
        cart = CartService("cart-session")
        cart.add("1", quantity=2)   # 2 x 1850
        cart.add("11")              # 1 x 180

        # Act / Assert
        assert cart.count() == 3
        assert cart.total() == 3880

    def test_add_rejects_zero_quantity(self):
        cart = CartService("cart-session")

        with pytest.raises(ValidationError, match="al menos 1"):
            cart.add("1", quantity=0)

    def test_add_unknown_product_raises_not_found(self):
        cart = CartService("cart-session")

        with pytest.raises(NotFoundError):
            cart.add("999")

    def test_update_quantity_to_zero_removes_line(self):
        # Arrange
        cart = CartService("cart-session")
        cart.add("1")
        cart.add("3")

        # Act
        items = cart.update_quantity("1", 0)

        # Assert
        assert [item.id for item in items] == ["3"]
        assert not cart.is_in_cart("1")

    def test_update_quantity_sets_value(self):
        cart = CartService("cart-session")
        cart.add("3")

        items = cart.update_quantity("3", 5)

        assert items[0].quantity == 5

    def test_carts_are_isolated_per_session(self):
        # Arrange
        CartService("session-a").add("1")

        # Act
        other = CartService("session-b")

        # Assert
        assert other.items() == []
        assert other.total() == 0

    def test_clear_empties_cart(self):
        cart = CartService("cart-session")
        cart.add("1")

        cart.clear()

        assert cart.summary() == {"items": [], "count": 0, "total": 0}
