"""
Pytest fixtures and configuration for Papalote Market tests

Every test starts from freshly loaded fixtures, an empty rate limiter and
maintenance mode off.
"""
import pytest
from fastapi.testclient import TestClient

from papalote.core.auth import create_access_token
from papalote.core.rate_limit import rate_limiter
from papalote.core.storage import reset_store
from papalote.main import app
from papalote.services.maintenance_service import set_maintenance_mode


@pytest.fixture(autouse=True)
def fresh_state():
    """Reload fixtures and clear process-wide flags around each test"""
    reset_store()
    rate_limiter.reset()
    set_maintenance_mode(False)
    yield
    set_maintenance_mode(False)


@pytest.fixture
def client():
    """
    API test client

    Cookies persist between requests, so one client is one visitor session.
    """
    with TestClient(app) as test_client:
        yield test_client


def _bearer(user_id: str, email: str, name: str, role: str) -> dict:
    token = create_access_token(user_id, email, name, role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def buyer_headers():
    """Juan Pérez (buyer, id "1")"""
    return _bearer("1", "juan@ejemplo.com", "Juan Pérez", "buyer")


@pytest.fixture
def seller_headers():
    """Sofía Ramírez (seller, id "3", shop "Tejidos Sofía")"""
    return _bearer("3", "sofia@ejemplo.com", "Sofía Ramírez", "seller")


@pytest.fixture
def other_seller_headers():
    """Pedro Martínez (seller, id "4", shop "Alebrijes Don Pedro")"""
    return _bearer("4", "pedro@ejemplo.com", "Pedro Martínez", "seller")


@pytest.fixture
def admin_headers():
    return _bearer("9", "admin@papalote.mx", "Administrador Papalote", "admin")


@pytest.fixture
def shipping_address():
    """Valid checkout address in Ciudad de México"""
    return {
        "firstName": "Juan",
        "lastName": "Pérez López",
        "email": "juan@ejemplo.com",
        "phone": "55 1234 5678",
        "street": "Calle Reforma",
        "streetNumber": "123",
        "neighborhood": "Juárez",
        "city": "Ciudad de México",
        "state": "Ciudad de México",
        "postalCode": "06600",
    }
