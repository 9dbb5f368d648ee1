"""
Pricing Calculator Domain Models

Cost breakdown used by artisans to price a product with a fair wage.
"""
from typing import List, Literal, Optional

from pydantic import Field

from papalote.domain.base import CamelModel


class MaterialCost(CamelModel):
    id: Optional[str] = None
    name: str
    quantity: float = Field(..., ge=0)
    unit: str = "pieza"
    cost_per_unit: float = Field(..., ge=0)
    total: float = 0


class LaborTask(CamelModel):
    id: Optional[str] = None
    task_name: str
    hours: float = Field(..., ge=0)
    # None = use the region's recommended hourly rate
    hourly_rate: Optional[float] = Field(None, ge=0)
    total: float = 0


class OverheadCost(CamelModel):
    id: Optional[str] = None
    name: str
    amount: float = Field(..., ge=0)
    frequency: Literal["per_piece", "monthly", "yearly"] = "per_piece"


class FairTradeRates(CamelModel):
    """
    Regional wage references (MXN)

    minimum_wage and living_wage are daily amounts;
    recommended_hourly_rate is what the calculator suggests for labor.
    """
    region: str
    region_name: str
    minimum_wage: float
    living_wage: float
    recommended_hourly_rate: float
    currency: str = "MXN"
    last_updated: str


class LivingWageComparison(CamelModel):
    is_above_minimum: bool
    is_above_living: bool
    percentage_above_minimum: float


class PricingCalculation(CamelModel):
    id: Optional[str] = None
    product_name: Optional[str] = None
    region: str = "oaxaca"

    materials: List[MaterialCost] = Field(default_factory=list)
    labor: List[LaborTask] = Field(default_factory=list)
    overhead: List[OverheadCost] = Field(default_factory=list)

    total_material_cost: float = 0
    total_labor_cost: float = 0
    total_overhead_cost: float = 0
    total_cost: float = 0

    profit_margin: float = Field(50, ge=0)
    suggested_wholesale_price: float = 0
    suggested_retail_price: float = 0

    fair_wage_rate: float = 0
    is_fair_wage: bool = False
    living_wage_comparison: Optional[LivingWageComparison] = None

    created_at: Optional[str] = None
