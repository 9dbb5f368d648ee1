"""
API tests for catalog browsing, shops and the visitor's browsing lists
"""
from fastapi.testclient import TestClient

from papalote.main import app


class TestCatalog:

    def test_list_first_page(self, client):
        # Act
        response = client.get("/api/products")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 16
        assert body["page"] == 1
        assert body["activeFilterCount"] == 0

    def test_filter_by_category(self, client):
        response = client.get("/api/products", params={"categoria": "Joyería"})

        body = response.json()
        assert {p["id"] for p in body["data"]} == {"7", "8"}
        assert body["activeFilterCount"] == 1

    def test_sort_by_price(self, client):
        response = client.get("/api/products", params={"ordenar": "price-asc"})

        prices = [p["price"] for p in response.json()["data"]]
        assert prices == sorted(prices)

    def test_invalid_sort_is_ignored(self, client):
        response = client.get("/api/products", params={"ordenar": "random"})

        assert response.status_code == 200
        assert response.json()["total"] == 16

    def test_filter_options(self, client):
        data = client.get("/api/products/filters").json()["data"]

        assert "Joyería" in data["categories"]
        assert data["priceRange"]["min"] <= data["priceRange"]["max"]


class TestProductDetail:

    def test_detail_includes_reviews(self, client):
        response = client.get("/api/products/1")

        data = response.json()["data"]
        assert data["name"] == "Huipil Bordado a Mano"
        assert any(r["buyerName"] == "Juan Pérez" for r in data["reviews"])

    def test_unknown_product(self, client):
        response = client.get("/api/products/999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Producto no encontrado: 999"}

    def test_viewing_products_fills_recently_viewed(self, client):
        # Arrange
        client.get("/api/products/3")
        client.get("/api/products/1")
        client.get("/api/products/3")

        # Act
        response = client.get("/api/products/recently-viewed")

        # Assert
        assert [p["id"] for p in response.json()["data"]] == ["3", "1"]

    def test_recommendations(self, client):
        response = client.get("/api/products/1/recommendations")

        data = response.json()["data"]
        assert [p["id"] for p in data["similar"]][:3] == ["2", "13", "16"]


class TestSearch:

    def test_search_records_history(self, client):
        # Act
        response = client.get("/api/products/search", params={"q": "huipil"})

        # Assert
        results = response.json()["data"]
        assert results[0]["product"]["id"] == "1"
        history = client.get("/api/products/search-history").json()["data"]
        assert [h["query"] for h in history] == ["huipil"]

    def test_blank_search_is_not_recorded(self, client):
        client.get("/api/products/search", params={"q": "   "})

        assert client.get("/api/products/search-history").json()["data"] == []

    def test_remove_one_search(self, client):
        # Arrange
        client.get("/api/products/search", params={"q": "alebrije"})
        client.get("/api/products/search", params={"q": "talavera"})

        # Act
        response = client.delete("/api/products/search-history", params={"query": "ALEBRIJE"})

        # Assert
        assert [h["query"] for h in response.json()["data"]] == ["talavera"]


class TestComparison:

    def test_add_until_full(self, client):
        # Arrange
        for product_id in ("1", "2", "3", "5"):
            client.post(f"/api/products/compare/{product_id}")

        # Act
        response = client.post("/api/products/compare/7")

        # Assert
        body = response.json()
        assert body["added"] is False
        assert body["data"]["count"] == 4
        assert body["data"]["isFull"] is True

    def test_toggle(self, client):
        first = client.post("/api/products/compare/1/toggle").json()
        second = client.post("/api/products/compare/1/toggle").json()

        assert first["inComparison"] is True
        assert second["inComparison"] is False
        assert second["data"]["count"] == 0

    def test_sessions_are_separate(self, client):
        client.post("/api/products/compare/1")

        with TestClient(app) as other:
            assert other.get("/api/products/compare").json()["data"]["count"] == 0


class TestShops:

    def test_list_by_state(self, client):
        response = client.get("/api/shops", params={"state": "Oaxaca"})

        assert response.json()["total"] == 2

    def test_shop_page(self, client):
        data = client.get("/api/shops/shop_001").json()["data"]

        assert data["shop"]["name"] == "Tejidos Sofía"
        assert {p["id"] for p in data["products"]} == {"1", "2", "13"}
        assert data["reviews"]["total"] == 3

    def test_unknown_shop(self, client):
        assert client.get("/api/shops/shop_999").status_code == 404
