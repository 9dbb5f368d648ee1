"""
Unit tests for AuthService and token handling
"""
import pytest

from papalote.core.auth import decode_token, user_from_authorization
from papalote.core.errors import ValidationError
from papalote.services.auth_service import AuthService, InvalidCredentialsError


class TestLogin:

    def test_login_issues_token_with_role(self):
        # Act
        user, token = AuthService().login("sofia@ejemplo.com", "Password123")

        # Assert
        payload = decode_token(token)
        assert user.role == "seller"
        assert payload["sub"] == "3"
        assert payload["role"] == "seller"

    def test_wrong_password(self):
        with pytest.raises(InvalidCredentialsError, match="Correo o contraseña incorrectos"):
            AuthService().login("juan@ejemplo.com", "wrong-password")

    def test_unknown_email(self):
        with pytest.raises(InvalidCredentialsError):
            AuthService().login("nadie@ejemplo.com", "Password123")

    def test_authorization_header_round_trip(self):
        _, token = AuthService().login("admin@papalote.mx", "Admin12345")

        user = user_from_authorization(f"Bearer {token}")

        assert user.is_admin
        assert user_from_authorization("Bearer not-a-token") is None


class TestRegister:

    def _register(self, **overrides):
        data = {
            "name": "Lucía Torres",
            "email": "lucia@ejemplo.com",
            "password": "Segura123",
            "confirm_password": "Segura123",
            "accept_terms": True,
        }
        data.update(overrides)
        return AuthService().register(**data)

    def test_register_then_login(self):
        # Act
        user, _ = self._register()

        # Assert
        assert user.role == "buyer"
        assert user.password_hash != "Segura123"
        logged_in, _ = AuthService().login("lucia@ejemplo.com", "Segura123")
        assert logged_in.id == user.id

    def test_duplicate_email(self):
        with pytest.raises(ValidationError, match="ya está registrado"):
            self._register(email="JUAN@ejemplo.com")

    @pytest.mark.parametrize("password,message", [
        ("Corta1", "al menos 8 caracteres"),
        ("sinmayuscula1", "mayúscula"),
        ("SINMINUSCULA1", "minúscula"),
        ("SinNumeros", "número"),
    ])
    def test_weak_password(self, password, message):
        with pytest.raises(ValidationError, match=message):
            self._register(password=password, confirm_password=password)

    def test_passwords_must_match(self):
        with pytest.raises(ValidationError, match="no coinciden"):
            self._register(confirm_password="Distinta123")

    def test_admin_role_cannot_self_register(self):
        with pytest.raises(ValidationError, match="Rol no permitido"):
            self._register(role="admin")
