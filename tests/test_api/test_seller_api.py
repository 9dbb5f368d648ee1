"""
API tests for the seller dashboard and seller verification
"""

DRAFT_ID = "PROD-MG8Z1K-A4X9QD"


class TestSellerAccess:

    def test_buyer_is_forbidden(self, client, buyer_headers):
        response = client.get("/api/seller/products", headers=buyer_headers)

        assert response.status_code == 403

    def test_seller_cannot_read_other_seller(self, client, other_seller_headers):
        response = client.get("/api/seller/products", params={"sellerId": "3"}, headers=other_seller_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "No puedes acceder a los datos de otro vendedor"

    def test_admin_can_act_for_seller(self, client, admin_headers):
        response = client.get("/api/seller/products/counts", params={"sellerId": "3"}, headers=admin_headers)

        assert response.json()["data"] == {"drafts": 1, "published": 1}


class TestSellerProductsAPI:

    def test_listing_requires_seller_id(self, client, seller_headers):
        response = client.get("/api/seller/products", headers=seller_headers)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "sellerId is required"}

    def test_publish_requires_seller_id(self, client, seller_headers):
        # Act
        response = client.post(f"/api/seller/products/{DRAFT_ID}/publish", headers=seller_headers)

        # Assert
        assert response.status_code == 400
        counts = client.get(
            "/api/seller/products/counts", params={"sellerId": "3"}, headers=seller_headers
        ).json()["data"]
        assert counts == {"drafts": 1, "published": 1}

    def test_create_uses_shop_name(self, client, seller_headers):
        # Act
        response = client.post(
            "/api/seller/products",
            json={
                "sellerId": "3",
                "product": {"name": "Morral de Lana", "price": 350, "category": "Textiles y Ropa"},
            },
            headers=seller_headers,
        )

        # Assert
        assert response.status_code == 201
        product = response.json()["data"]
        assert product["sellerName"] == "Tejidos Sofía"
        assert product["sellerId"] == "3"

    def test_create_without_product(self, client, seller_headers):
        response = client.post("/api/seller/products", json={}, headers=seller_headers)

        assert response.status_code == 400

    def test_publish_draft(self, client, seller_headers):
        # Act
        response = client.post(
            f"/api/seller/products/{DRAFT_ID}/publish", params={"sellerId": "3"}, headers=seller_headers
        )

        # Assert
        assert response.json()["data"]["status"] == "published"
        counts = client.get(
            "/api/seller/products/counts", params={"sellerId": "3"}, headers=seller_headers
        ).json()["data"]
        assert counts == {"drafts": 0, "published": 2}

    def test_delete(self, client, seller_headers):
        # Act
        client.delete(
            "/api/seller/products", params={"productId": DRAFT_ID, "sellerId": "3"}, headers=seller_headers
        )

        # Assert
        response = client.get(
            f"/api/seller/products/{DRAFT_ID}", params={"sellerId": "3"}, headers=seller_headers
        )
        assert response.status_code == 404


class TestSellerOrdersAPI:

    def test_inbox_flags_new_orders(self, client, seller_headers):
        # Arrange
        client.post("/api/seller/orders/seen", json={"orderIds": ["ORD-M1D2QX-9TR4BN"]}, headers=seller_headers)

        # Act
        data = client.get("/api/seller/orders", headers=seller_headers).json()["data"]

        # Assert
        assert data["newCount"] == 1
        new_orders = client.get("/api/seller/orders/new", headers=seller_headers).json()
        assert [o["id"] for o in new_orders["data"]] == ["ORD-LZ3K9A-7HQ2XW"]

    def test_update_status(self, client, seller_headers):
        response = client.patch(
            "/api/seller/orders/ORD-M1D2QX-9TR4BN/status",
            json={"status": "shipped", "tracking": "MX987654321"},
            headers=seller_headers,
        )

        data = response.json()["data"]
        assert data["status"] == "shipped"
        assert data["sellerTotal"] == 780

    def test_cannot_update_order_without_own_items(self, client, seller_headers):
        response = client.patch(
            "/api/seller/orders/ORD-M0B7TQ-2PLX9D/status",
            json={"status": "shipped"},
            headers=seller_headers,
        )

        assert response.status_code == 404


class TestSellerDashboardAPI:

    def test_analytics(self, client, seller_headers):
        data = client.get("/api/seller/analytics", headers=seller_headers).json()["data"]

        assert data["live"]["revenue"] == 2630

    def test_tasks(self, client, seller_headers):
        body = client.get("/api/seller/tasks", headers=seller_headers).json()

        assert body["total"] == len(body["data"])
        assert body["data"][0]["priority"] == "critical"


class TestVerificationAPI:

    def test_get_existing(self, client):
        response = client.get("/api/seller/verification", params={"email": "jorge@example.com"})

        assert response.json()["data"]["id"] == "ver_001"

    def test_get_none(self, client):
        response = client.get("/api/seller/verification", params={"email": "nadie@ejemplo.com"})

        assert response.json() == {"success": True, "data": None}

    def test_get_requires_email(self, client):
        response = client.get("/api/seller/verification")

        assert response.status_code == 400
        assert response.json()["error"] == "Email required"

    def test_submit_and_approve(self, client):
        # Arrange
        submitted = client.post("/api/seller/verification", json={
            "sellerEmail": "ana@ejemplo.com",
            "sellerName": "Ana Artesana",
        })
        assert submitted.status_code == 201

        # Act
        response = client.patch("/api/seller/verification", json={
            "id": submitted.json()["data"]["id"],
            "status": "approved",
        })

        # Assert
        assert response.json()["data"]["status"] == "approved"

    def test_update_unknown(self, client):
        response = client.patch("/api/seller/verification", json={"id": "ver_999", "status": "approved"})

        assert response.status_code == 404
