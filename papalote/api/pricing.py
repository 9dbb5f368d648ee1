"""
Pricing Calculator API Endpoints
Fair-trade price suggestions for artisans
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field

from papalote.api.deps import resolve_email
from papalote.core.auth import TokenUser, get_current_user_optional
from papalote.core.errors import PapaloteError, ok
from papalote.domain.base import CamelModel
from papalote.domain.pricing import LaborTask, MaterialCost, OverheadCost
from papalote.services.pricing_service import DEFAULT_REGION, PricingService


logger = logging.getLogger(__name__)

router = APIRouter()


class CalculationRequest(CamelModel):
    product_name: Optional[str] = None
    region: str = DEFAULT_REGION
    materials: List[MaterialCost] = Field(default_factory=list)
    labor: List[LaborTask] = Field(default_factory=list)
    overhead: List[OverheadCost] = Field(default_factory=list)
    profit_margin: float = 50
    email: Optional[str] = None


def _calculate(service: PricingService, payload: CalculationRequest):
    return service.calculate(
        materials=payload.materials,
        labor=payload.labor,
        overhead=payload.overhead,
        profit_margin=payload.profit_margin,
        region=payload.region,
        product_name=payload.product_name,
    )


@router.get("/regions")
async def list_regions():
    """Regions with fair-trade wage references"""
    rates = PricingService().list_regions()
    return ok([r.to_dict() for r in rates])


@router.get("/rates/{region}")
async def get_rates(region: str):
    return ok(PricingService().get_fair_trade_rates(region).to_dict())


@router.post("/calculate")
async def calculate_price(payload: CalculationRequest):
    """
    Suggested wholesale and retail prices

    Labor tasks without hourlyRate use the region's recommended rate.
    """
    try:
        calculation = _calculate(PricingService(), payload)
        return ok(calculation.to_dict())

    except (HTTPException, PapaloteError):
        raise
    except Exception as e:
        logger.error(f"Error calculating price: {e}")
        raise HTTPException(status_code=500, detail="Error al calcular el precio")


@router.post("/calculations")
async def save_calculation(
    payload: CalculationRequest,
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    """Recalculate and save under the user's email (requires productName)"""
    email = resolve_email(payload.email, user)
    service = PricingService()
    saved = service.save_calculation(email, _calculate(service, payload))
    return ok(saved.to_dict(), message="Cálculo guardado")


@router.get("/calculations")
async def list_calculations(
    email: Optional[str] = Query(None),
    user: Optional[TokenUser] = Depends(get_current_user_optional),
):
    calculations = PricingService().list_calculations(resolve_email(email, user))
    return ok([c.to_dict() for c in calculations], total=len(calculations))
