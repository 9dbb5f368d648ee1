"""
Unit tests for BrowsingService (comparison, recently viewed, search history)
"""
import pytest

from papalote.core.errors import NotFoundError
from papalote.services.browsing_service import BrowsingService


class TestComparison:

    def test_comparison_holds_at_most_four_products(self):
        # Arrange
        service = BrowsingService("browse-session")
        for product_id in ("1", "2", "3", "5"):
            assert service.add_to_comparison(product_id) is True

        # Act
        added = service.add_to_comparison("6")

        # Assert
        state = service.comparison_state()
        assert added is False
        assert state["count"] == 4
        assert state["isFull"] is True
        assert state["canAdd"] is False

    def test_duplicate_is_not_added(self):
        service = BrowsingService("browse-session")
        service.add_to_comparison("1")

        assert service.add_to_comparison("1") is False
        assert service.comparison_state()["count"] == 1

    def test_toggle(self):
        service = BrowsingService("browse-session")

        assert service.toggle_comparison("1") is True
        assert service.toggle_comparison("1") is False
        assert service.comparison_state()["count"] == 0

    def test_can_compare_from_two_products(self):
        service = BrowsingService("browse-session")
        service.add_to_comparison("1")
        assert service.comparison_state()["canCompare"] is False

        service.add_to_comparison("2")
        assert service.comparison_state()["canCompare"] is True

    def test_unknown_product(self):
        with pytest.raises(NotFoundError):
            BrowsingService("browse-session").add_to_comparison("999")


class TestRecentlyViewed:

    def test_latest_view_moves_to_front(self):
        # Arrange
        service = BrowsingService("browse-session")
        service.record_view("1")
        service.record_view("2")

        # Act
        service.record_view("1")

        # Assert
        assert service.recently_viewed_ids() == ["1", "2"]

    def test_keeps_ten_entries(self):
        service = BrowsingService("browse-session")
        for product_id in range(1, 13):
            service.record_view(str(product_id))

        ids = service.recently_viewed_ids()

        assert len(ids) == 10
        assert ids[0] == "12"


class TestSearchHistory:

    def test_repeated_query_moves_to_front_case_insensitively(self):
        # Arrange
        service = BrowsingService("browse-session")
        service.add_search("talavera")
        service.add_search("plata")

        # Act
        history = service.add_search("Talavera")

        # Assert
        assert [item["query"] for item in history] == ["Talavera", "plata"]

    def test_blank_query_is_ignored(self):
        service = BrowsingService("browse-session")

        assert service.add_search("   ") == []

    def test_remove_single_entry(self):
        service = BrowsingService("browse-session")
        service.add_search("talavera")
        service.add_search("plata")

        history = service.remove_search("PLATA")

        assert [item["query"] for item in history] == ["talavera"]

    def test_history_keeps_ten_newest(self):
        # Arrange
        service = BrowsingService("browse-session")

        # Act
        for n in range(1, 13):
            history = service.add_search(f"consulta {n}")

        # Assert
        assert len(history) == 10
        assert history[0]["query"] == "consulta 12"
        assert history[-1]["query"] == "consulta 3"
        assert service.search_history() == history
