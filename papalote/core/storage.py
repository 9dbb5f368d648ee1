"""
Almacenamiento en memoria respaldado por fixtures JSON

Este módulo centraliza el acceso a datos de Papalote Market:
- Carga de fixtures JSON (productos, tiendas, pedidos, reseñas, etc.)
- Tablas en memoria que los repositorios leen y modifican
- Estado por sesión (carrito, comparación, vistos recientemente, búsquedas)

No hay base de datos: todo se reinicia cuando el proceso se reinicia.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import settings


logger = logging.getLogger(__name__)


# Fixture name -> default value when the file is missing
FIXTURES: Dict[str, Any] = {
    "products": [],
    "shops": [],
    "orders": [],
    "reviews": [],
    "messages": [],
    "analytics": {},
    "achievements": [],
    "favorites": {},
    "fair_trade_rates": [],
    "users": [],
    "seller_products": [],
    "verification_requests": [],
}


class DataStore:
    """
    In-memory tables loaded from the bundled JSON fixtures.

    Every table holds raw camelCase records (the same shape as the fixture
    files). Repositories map them to domain models.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.reset()

    def load_fixture(self, name: str) -> Any:
        """Read one fixture file, falling back to an empty default"""
        path = self.data_dir / f"{name}.json"
        if not path.exists():
            logger.warning(f"Fixture not found: {path}")
            return json.loads(json.dumps(FIXTURES[name]))

        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def reset(self) -> None:
        """(Re)load every fixture and drop all in-memory mutations"""
        for name in FIXTURES:
            setattr(self, name, self.load_fixture(name))

        # Buyer state keyed by email
        self.addresses: Dict[str, List[dict]] = {}
        self.pricing_calculations: Dict[str, List[dict]] = {}

        # Seller state keyed by lower-cased seller name
        self.seen_orders: Dict[str, List[str]] = {}

        # Visitor state keyed by session id
        self.sessions: Dict[str, Dict[str, list]] = {}

        # Admin settings (None = defaults)
        self.platform_settings: Optional[dict] = None

        logger.info(
            f"Fixtures loaded from {self.data_dir}: "
            f"{len(self.products)} products, {len(self.shops)} shops, {len(self.orders)} orders"
        )

    def session(self, session_id: str) -> Dict[str, list]:
        """Get (or create) the state bucket for a visitor session"""
        if session_id not in self.sessions:
            self.sessions[session_id] = {
                "cart": [],
                "comparison": [],
                "recently_viewed": [],
                "search_history": [],
            }
        return self.sessions[session_id]

    def counts(self) -> Dict[str, int]:
        """Record counts per table (used by /health)"""
        return {
            "products": len(self.products),
            "shops": len(self.shops),
            "orders": len(self.orders),
            "reviews": len(self.reviews),
            "users": len(self.users),
            "sessions": len(self.sessions),
        }


_store: Optional[DataStore] = None


def get_store() -> DataStore:
    """
    Get the process-wide data store

    Usage:
        store = get_store()
        for row in store.products:
            ...
    """
    global _store
    if _store is None:
        _store = DataStore(settings.DATA_DIR)
    return _store


def reset_store() -> DataStore:
    """Reload fixtures, discarding every in-memory change"""
    store = get_store()
    store.reset()
    return store
