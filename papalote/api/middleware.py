"""
Maintenance mode middleware

While maintenance mode is on, everything except the maintenance switch,
auth, admin, health and docs answers 503. Admin tokens pass through.
"""
import logging

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware

from papalote.core.auth import user_from_authorization
from papalote.core.errors import error_response
from papalote.services.maintenance_service import (
    MAINTENANCE_MESSAGE,
    is_maintenance_mode,
    is_path_allowed,
)


logger = logging.getLogger(__name__)


class MaintenanceMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        if not is_maintenance_mode() or request.method == "OPTIONS" or is_path_allowed(request.url.path):
            return await call_next(request)

        user = user_from_authorization(request.headers.get("Authorization"))
        if user is not None and user.is_admin:
            return await call_next(request)

        logger.debug(f"Blocked during maintenance: {request.method} {request.url.path}")
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            MAINTENANCE_MESSAGE,
            headers={"Retry-After": "3600"},
        )
