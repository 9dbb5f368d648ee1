"""
Maintenance Service - process-wide maintenance switch

The flag lives in this process only: it starts off and resets on restart.
"""
import logging


logger = logging.getLogger(__name__)

_maintenance_mode = False

# Reachable while maintenance mode is on
ALLOWED_PREFIXES = (
    "/api/maintenance",
    "/api/auth",
    "/api/admin",
    "/health",
    "/docs",
    "/openapi.json",
)

MAINTENANCE_MESSAGE = "El sitio está en mantenimiento. Vuelve a intentarlo más tarde."


def is_maintenance_mode() -> bool:
    return _maintenance_mode


def set_maintenance_mode(enabled: bool) -> bool:
    """Turn maintenance mode on or off; returns the new value"""
    global _maintenance_mode
    if enabled != _maintenance_mode:
        logger.warning(f"Maintenance mode {'enabled' if enabled else 'disabled'}")
    _maintenance_mode = bool(enabled)
    return _maintenance_mode


def is_path_allowed(path: str) -> bool:
    """Paths that stay reachable during maintenance"""
    return any(path == prefix or path.startswith(prefix + "/") for prefix in ALLOWED_PREFIXES)
