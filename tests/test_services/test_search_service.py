"""
Unit tests for SearchService
"""
import pytest

from papalote.repositories.product_repository import ProductRepository
from papalote.services.search_service import SearchService, fuzzy_match, levenshtein_distance


class TestFuzzyMatch:

    def test_levenshtein_distance(self):
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3

    def test_exact_match_scores_one(self):
        assert fuzzy_match("Oaxaca", "oaxaca") == 1.0

    def test_substring_at_start_scores_highest_substring(self):
        assert fuzzy_match("barro negro", "barro") == pytest.approx(0.9)

    def test_typo_still_matches(self):
        assert fuzzy_match("alebrije", "alebrje") > 0

    def test_unrelated_text_scores_zero(self):
        assert fuzzy_match("plata", "xyz") == 0.0


class TestSearchService:
    """Test catalog search"""

    def setup_method(self):
        self.products = ProductRepository().find_all()

    def test_best_match_first(self):
        # Act
        results = SearchService.search(self.products, "alebrije")

        # Assert
        ids = [r.product.id for r in results]
        assert ids[0] == "3"
        assert "4" in ids
        assert "name" in results[0].matched_fields

    def test_blank_query_returns_nothing(self):
        assert SearchService.search(self.products, "   ") == []

    def test_limit(self):
        results = SearchService.search(self.products, "barro", limit=2)

        assert len(results) == 2

    def test_suggestions_prefer_prefix_matches(self):
        suggestions = SearchService.suggestions(self.products, "ale")

        assert suggestions[0] == "Alebrije Jaguar"
        assert all("ale" in s.lower() for s in suggestions)

    def test_suggestions_need_two_characters(self):
        assert SearchService.suggestions(self.products, "a") == []
