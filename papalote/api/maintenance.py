"""
Maintenance API Endpoints
Read and toggle the site-wide maintenance switch
"""
from fastapi import APIRouter, Depends

from papalote.core.auth import TokenUser, require_admin
from papalote.domain.base import CamelModel
from papalote.services.maintenance_service import is_maintenance_mode, set_maintenance_mode


router = APIRouter()


class MaintenanceToggle(CamelModel):
    enabled: bool


@router.get("")
async def get_maintenance():
    return {"success": True, "maintenanceMode": is_maintenance_mode()}


@router.post("")
async def toggle_maintenance(payload: MaintenanceToggle, user: TokenUser = Depends(require_admin)):
    """Turn maintenance mode on or off (admin only)"""
    enabled = set_maintenance_mode(payload.enabled)
    return {"success": True, "maintenanceMode": enabled}
