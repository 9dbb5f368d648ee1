"""
Admin API Endpoints
Platform settings (admin only)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from papalote.core.auth import TokenUser, require_admin
from papalote.core.errors import ok
from papalote.services.settings_service import SettingsService, SettingsValidationError


logger = logging.getLogger(__name__)

router = APIRouter()


def _validation_failed(e: SettingsValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": str(e), "errors": e.errors},
    )


@router.get("/settings")
async def get_settings(user: TokenUser = Depends(require_admin)):
    return ok(SettingsService().get().to_dict())


@router.put("/settings")
async def save_settings(
    settings: Dict[str, Any] = Body(...),
    user: TokenUser = Depends(require_admin),
):
    """Replace all settings; general.maintenanceMode also switches maintenance mode"""
    try:
        saved = SettingsService().save(settings, user_id=user.id)
    except SettingsValidationError as e:
        return _validation_failed(e)
    return ok(saved.to_dict(), message="Configuración guardada exitosamente")


@router.post("/settings/reset")
async def reset_settings(user: TokenUser = Depends(require_admin)):
    settings = SettingsService().reset()
    logger.info(f"Settings reset by {user.email}")
    return ok(settings.to_dict(), message="Configuración restablecida a valores por defecto")


@router.post("/settings/validate")
async def validate_settings(
    settings: Dict[str, Any] = Body(...),
    user: TokenUser = Depends(require_admin),
):
    """Check settings without saving"""
    errors = SettingsService.validate(settings)
    return ok({"valid": not errors, "errors": errors})


@router.post("/settings/test-email")
async def test_email(
    email_settings: Optional[Dict[str, Any]] = Body(None),
    user: TokenUser = Depends(require_admin),
):
    return ok(None, message=SettingsService().test_email_config(email_settings))


@router.put("/settings/{section}")
async def save_section(
    section: str,
    values: Dict[str, Any] = Body(...),
    user: TokenUser = Depends(require_admin),
):
    """Update one section (general, payments, notifications, security, email, appearance)"""
    try:
        saved = SettingsService().save_section(section, values, user_id=user.id)
    except SettingsValidationError as e:
        return _validation_failed(e)
    return ok(saved.to_dict(), message="Sección actualizada exitosamente")
