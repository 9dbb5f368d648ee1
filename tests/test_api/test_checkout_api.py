"""
API tests for the cart and checkout flow
"""


def _checkout_payload(address, **overrides):
    payload = {
        "shippingAddress": address,
        "paymentMethod": "card",
        "acceptTerms": True,
    }
    payload.update(overrides)
    return payload


class TestCartAPI:

    def test_add_same_product_twice_merges_lines(self, client):
        # Act
        client.post("/api/cart/items", json={"productId": "7"})
        response = client.post("/api/cart/items", json={"productId": "7", "quantity": 2})

        # Assert
        data = response.json()["data"]
        assert len(data["items"]) == 1
        assert data["count"] == 3
        assert data["total"] == 2670

    def test_unknown_product(self, client):
        response = client.post("/api/cart/items", json={"productId": "999"})

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_missing_product_id(self, client):
        response = client.post("/api/cart/items", json={"quantity": 1})

        assert response.status_code == 400
        assert response.json()["error"] == "productId is required"

    def test_zero_quantity_removes_line(self, client):
        # Arrange
        client.post("/api/cart/items", json={"productId": "7"})

        # Act
        response = client.patch("/api/cart/items/7", json={"quantity": 0})

        # Assert
        assert response.json()["data"]["items"] == []
        assert client.get("/api/cart/items/7").json()["data"]["inCart"] is False

    def test_cart_is_per_session_cookie(self, client):
        # Act
        response = client.post("/api/cart/items", json={"productId": "7"})

        # Assert
        assert "papalote_session" in response.cookies
        assert client.get("/api/cart").json()["data"]["count"] == 1


class TestCheckoutAPI:

    def test_shipping_quote(self, client):
        data = client.get("/api/checkout/shipping", params={"subtotal": 890}).json()["data"]

        assert data["shippingCost"] == 150
        assert data["amountToFreeShipping"] == 110

    def test_free_shipping_over_threshold(self, client):
        data = client.get("/api/checkout/shipping", params={"subtotal": 1000}).json()["data"]

        assert data["shippingCost"] == 0

    def test_apply_coupon(self, client):
        # Arrange
        client.post("/api/cart/items", json={"productId": "7"})

        # Act
        response = client.post("/api/checkout/coupon", json={"code": " primera10 "})

        # Assert
        data = response.json()["data"]
        assert data["code"] == "PRIMERA10"
        assert data["discountAmount"] == 89

    def test_coupon_below_minimum(self, client):
        # Arrange
        client.post("/api/cart/items", json={"productId": "11"})

        # Act
        response = client.post("/api/checkout/coupon", json={"code": "ARTESANO20"})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "Este cupón requiere una compra mínima de $1000 MXN"

    def test_summary(self, client):
        # Arrange
        client.post("/api/cart/items", json={"productId": "7"})

        # Act
        response = client.post("/api/checkout/summary", json={"couponCode": "PRIMERA10", "giftWrap": True})

        # Assert
        summary = response.json()["data"]["summary"]
        assert summary["subtotal"] == 890
        assert summary["shippingCost"] == 150
        assert summary["discount"] == 89
        assert summary["giftWrapFee"] == 50
        assert summary["total"] == 1001

    def test_place_order_empties_cart(self, client, shipping_address):
        # Arrange
        client.post("/api/cart/items", json={"productId": "7"})

        # Act
        response = client.post("/api/checkout/orders", json=_checkout_payload(shipping_address))

        # Assert
        assert response.status_code == 201
        order = response.json()["data"]
        assert order["id"].startswith("ORD-")
        assert order["status"] == "confirmed"
        assert order["paymentStatus"] == "completed"
        assert order["total"] == 1040
        assert client.get("/api/cart").json()["data"]["items"] == []

    def test_deferred_payment_is_pending(self, client, shipping_address):
        client.post("/api/cart/items", json={"productId": "7"})

        order = client.post(
            "/api/checkout/orders",
            json=_checkout_payload(shipping_address, paymentMethod="oxxo"),
        ).json()["data"]

        assert order["status"] == "pending"
        assert order["paymentStatus"] == "pending"

    def test_empty_cart(self, client, shipping_address):
        response = client.post("/api/checkout/orders", json=_checkout_payload(shipping_address))

        assert response.status_code == 400
        assert response.json()["error"] == "Tu carrito está vacío"

    def test_terms_must_be_accepted(self, client, shipping_address):
        client.post("/api/cart/items", json={"productId": "7"})

        response = client.post(
            "/api/checkout/orders",
            json=_checkout_payload(shipping_address, acceptTerms=False),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Debes aceptar los términos y condiciones"

    def test_signed_in_order_shows_in_buyer_orders(self, client, shipping_address, buyer_headers):
        # Arrange
        client.post("/api/cart/items", json={"productId": "7"})

        # Act
        order = client.post(
            "/api/checkout/orders",
            json=_checkout_payload(shipping_address, saveAddress=True),
            headers=buyer_headers,
        ).json()["data"]

        # Assert
        orders = client.get("/api/buyer/orders", headers=buyer_headers).json()
        assert orders["total"] == 3
        assert orders["data"][0]["id"] == order["id"]
        default = client.get("/api/buyer/addresses/default", headers=buyer_headers).json()["data"]
        assert default["postalCode"] == "06600"
