"""
Unit tests for OrderRepository
"""
from papalote.repositories.order_repository import OrderRepository


class TestOrderLookups:

    def test_find_by_id_and_number(self):
        repo = OrderRepository()

        assert repo.find_by_id("ORD-M1D2QX-9TR4BN").order_number == "PM2510-6610"
        assert repo.find_by_number("PM2510-3381").id == "ORD-M0B7TQ-2PLX9D"
        assert repo.find_by_id("ORD-NOPE") is None

    def test_find_by_email(self):
        orders = OrderRepository().find_by_email("Maria@Ejemplo.com")

        assert [o.id for o in orders] == ["ORD-M1D2QX-9TR4BN", "ORD-M1C9RZ-5KD8WE"]

    def test_find_by_maker(self):
        orders = OrderRepository().find_by_maker("Tejidos Sofía")

        assert {o.id for o in orders} == {"ORD-M1D2QX-9TR4BN", "ORD-LZ3K9A-7HQ2XW"}


class TestOrderWrites:

    def test_save_puts_new_order_first(self):
        # Arrange
        repo = OrderRepository()
        order = repo.find_by_id("ORD-M1C9RZ-5KD8WE").model_copy(update={"id": "ORD-NEW001-AAAAAA"})

        # Act
        repo.save(order)

        # Assert
        assert repo.find_all()[0].id == "ORD-NEW001-AAAAAA"

    def test_update_status_with_tracking(self):
        # Act
        updated = OrderRepository().update_status("ORD-M1C9RZ-5KD8WE", "shipped", tracking="MX123")

        # Assert
        assert updated.status == "shipped"
        assert updated.tracking == "MX123"
        assert OrderRepository().find_by_id("ORD-M1C9RZ-5KD8WE").status == "shipped"

    def test_update_status_of_unknown_order(self):
        assert OrderRepository().update_status("ORD-NOPE", "shipped") is None

    def test_seen_ids_merge_without_duplicates(self):
        # Arrange
        repo = OrderRepository()
        repo.add_seen_ids("Tejidos Sofía", ["ORD-A", "ORD-B"])

        # Act
        seen = repo.add_seen_ids("tejidos sofía", ["ORD-B", "ORD-C"])

        # Assert
        assert seen == ["ORD-A", "ORD-B", "ORD-C"]
        assert repo.get_seen_ids("TEJIDOS SOFÍA") == seen
