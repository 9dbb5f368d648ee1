"""
API tests for login, registration and the current user
"""


class TestLoginAPI:

    def test_login_and_me(self, client):
        # Act
        response = client.post("/api/auth/login", json={"email": "maria@ejemplo.com", "password": "Password123"})

        # Assert
        data = response.json()["data"]
        assert data["tokenType"] == "bearer"
        assert data["user"]["id"] == "2"
        assert "passwordHash" not in data["user"]

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['accessToken']}"})
        assert me.json()["data"]["email"] == "maria@ejemplo.com"

    def test_wrong_password(self, client):
        response = client.post("/api/auth/login", json={"email": "maria@ejemplo.com", "password": "Nope12345"})

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Correo o contraseña incorrectos"}

    def test_invalid_email_format(self, client):
        response = client.post("/api/auth/login", json={"email": "not-an-email", "password": "x"})

        assert response.status_code == 400

    def test_login_is_rate_limited(self, client):
        # Arrange
        credentials = {"email": "maria@ejemplo.com", "password": "Nope12345"}
        for _ in range(10):
            client.post("/api/auth/login", json=credentials)

        # Act
        response = client.post("/api/auth/login", json=credentials)

        # Assert
        assert response.status_code == 429

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Authentication required"

    def test_me_rejects_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401


class TestRegisterAPI:

    def test_register_seller(self, client):
        # Act
        response = client.post("/api/auth/register", json={
            "name": "Lucía Torres",
            "email": "lucia@ejemplo.com",
            "password": "Segura123",
            "confirmPassword": "Segura123",
            "acceptTerms": True,
            "role": "seller",
        })

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Cuenta creada exitosamente"
        assert body["data"]["user"]["role"] == "seller"

    def test_terms_not_accepted(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Lucía Torres",
            "email": "lucia@ejemplo.com",
            "password": "Segura123",
            "confirmPassword": "Segura123",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "Debes aceptar los términos y condiciones"
