"""
Buyer API Endpoints
Signed-in buyer profile: orders, saved addresses, achievements and impact
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from papalote.core.auth import TokenUser, get_current_user
from papalote.core.errors import PapaloteError, ok
from papalote.domain.order import ShippingAddress
from papalote.services.buyer_service import BuyerService
from papalote.services.validators import validate_shipping_address


logger = logging.getLogger(__name__)

router = APIRouter()


class AddressPayload(ShippingAddress):
    id: Optional[str] = None
    is_default: bool = False
    label: Optional[str] = None


# =============================================================================
# Orders
# =============================================================================

@router.get("/orders")
async def list_orders(user: TokenUser = Depends(get_current_user)):
    """Buyer's orders, newest first"""
    orders = BuyerService().orders_for(user.email)
    return ok([o.to_dict() for o in orders], total=len(orders))


@router.get("/orders/{reference}")
async def get_order(reference: str, user: TokenUser = Depends(get_current_user)):
    """One of the buyer's orders by ID or order number (admins see any order)"""
    order = BuyerService().get_order(reference, email=None if user.is_admin else user.email)
    return ok(order.to_dict())


# =============================================================================
# Saved addresses
# =============================================================================

@router.get("/addresses")
async def list_addresses(user: TokenUser = Depends(get_current_user)):
    addresses = BuyerService().list_addresses(user.email)
    return ok([a.to_dict() for a in addresses], total=len(addresses))


@router.get("/addresses/default")
async def get_default_address(user: TokenUser = Depends(get_current_user)):
    address = BuyerService().default_address(user.email)
    return ok(address.to_dict() if address else None)


@router.post("/addresses")
async def save_address(payload: AddressPayload, user: TokenUser = Depends(get_current_user)):
    """Save an address; a new default replaces the previous one"""
    try:
        data = payload.to_dict()
        validate_shipping_address(data)
        address = BuyerService().save_address(user.email, data)
        return ok(address.to_dict(), message="Dirección guardada")

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error saving address for {user.email}: {e}")
        raise HTTPException(status_code=500, detail="No se pudo guardar la dirección")


@router.delete("/addresses/{address_id}")
async def delete_address(address_id: str, user: TokenUser = Depends(get_current_user)):
    BuyerService().delete_address(user.email, address_id)
    return ok(None, message="Dirección eliminada")


# =============================================================================
# Achievements & impact
# =============================================================================

@router.get("/achievements")
async def get_achievements(user: TokenUser = Depends(get_current_user)):
    """Achievement catalog with the buyer's progress"""
    return ok(BuyerService().achievements(user.email, user.name))


@router.get("/impact")
async def get_impact(user: TokenUser = Depends(get_current_user)):
    """How much of the buyer's spending reached artisans"""
    return ok(BuyerService().impact(user.email).to_dict())
