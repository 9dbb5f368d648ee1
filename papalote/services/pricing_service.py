"""
Pricing Service - fair-trade pricing calculator for artisans

Cost model:
    material total = quantity * cost per unit
    labor total    = hours * hourly rate
    total cost     = materials + labor + overhead
    wholesale      = total cost * (1 + margin / 100)
    retail         = wholesale * 2

Overhead frequency is informational only; every overhead amount is added
as-is to the cost of one piece.
"""
import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from papalote.core.dates import utc_now_iso
from papalote.core.errors import NotFoundError, ValidationError
from papalote.domain.pricing import (
    FairTradeRates,
    LaborTask,
    LivingWageComparison,
    MaterialCost,
    OverheadCost,
    PricingCalculation,
)
from papalote.repositories.pricing_repository import PricingRepository


logger = logging.getLogger(__name__)

DEFAULT_REGION = "oaxaca"
DEFAULT_HOURLY_RATE = 45
RETAIL_MULTIPLIER = 2
# Daily wages are converted with an 8-hour working day
HOURS_PER_DAY = 8


def round_money(value: float) -> float:
    """Round to cents, half-up"""
    return float(Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


class PricingService:
    """
    Service for the pricing calculator

    Usage:
        service = PricingService()
        calc = service.calculate(materials, labor, overhead, profit_margin=50)
    """

    def __init__(self, repo: Optional[PricingRepository] = None):
        self.repo = repo or PricingRepository()

    def get_fair_trade_rates(self, region: str = DEFAULT_REGION) -> FairTradeRates:
        """
        Get regional wage references

        Raises:
            NotFoundError: if the region has no rates
        """
        rates = self.repo.find_rates(region)
        if rates is None:
            raise NotFoundError(f"No hay tarifas de comercio justo para la región: {region}")
        return rates

    def list_regions(self) -> List[FairTradeRates]:
        return self.repo.find_all_rates()

    @staticmethod
    def calculate_material_total(material: MaterialCost) -> float:
        return round_money(material.quantity * material.cost_per_unit)

    @staticmethod
    def calculate_labor_total(task: LaborTask) -> float:
        return round_money(task.hours * (task.hourly_rate or 0))

    @staticmethod
    def is_using_fair_wage(labor: List[LaborTask], rates: Optional[FairTradeRates]) -> bool:
        """Every task pays at least the recommended hourly rate"""
        if rates is None:
            return False
        return all((task.hourly_rate or 0) >= rates.recommended_hourly_rate for task in labor)

    @staticmethod
    def compare_to_living_wage(labor: List[LaborTask], rates: FairTradeRates) -> LivingWageComparison:
        """
        Compare the effective hourly rate against the regional wages

        The effective rate is total labor cost / total hours.
        """
        total_hours = sum(task.hours for task in labor)
        total_pay = sum(task.hours * (task.hourly_rate or 0) for task in labor)
        effective_rate = total_pay / total_hours if total_hours else 0

        minimum_hourly = rates.minimum_wage / HOURS_PER_DAY
        living_hourly = rates.living_wage / HOURS_PER_DAY

        return LivingWageComparison(
            is_above_minimum=effective_rate >= minimum_hourly,
            is_above_living=effective_rate >= living_hourly,
            percentage_above_minimum=round_money((effective_rate / minimum_hourly - 1) * 100) if minimum_hourly else 0,
        )

    def calculate(
        self,
        materials: List[MaterialCost],
        labor: List[LaborTask],
        overhead: List[OverheadCost],
        profit_margin: float = 50,
        region: str = DEFAULT_REGION,
        product_name: Optional[str] = None,
    ) -> PricingCalculation:
        """
        Run the full calculation

        Labor tasks without an hourly rate get the region's recommended rate
        (or DEFAULT_HOURLY_RATE when the region is unknown).

        Raises:
            ValidationError: if profit_margin is negative
        """
        if profit_margin < 0:
            raise ValidationError("El margen de ganancia no puede ser negativo")

        rates = self.repo.find_rates(region)
        default_rate = rates.recommended_hourly_rate if rates else DEFAULT_HOURLY_RATE

        priced_materials = [
            m.model_copy(update={"total": self.calculate_material_total(m)})
            for m in materials
        ]

        priced_labor = []
        for task in labor:
            rate = task.hourly_rate if task.hourly_rate is not None else default_rate
            task = task.model_copy(update={"hourly_rate": rate})
            priced_labor.append(task.model_copy(update={"total": self.calculate_labor_total(task)}))

        total_material = round_money(sum(m.total for m in priced_materials))
        total_labor = round_money(sum(t.total for t in priced_labor))
        total_overhead = round_money(sum(o.amount for o in overhead))
        total_cost = round_money(total_material + total_labor + total_overhead)

        wholesale = round_money(total_cost * (1 + profit_margin / 100))
        retail = round_money(wholesale * RETAIL_MULTIPLIER)

        return PricingCalculation(
            product_name=product_name,
            region=region,
            materials=priced_materials,
            labor=priced_labor,
            overhead=overhead,
            total_material_cost=total_material,
            total_labor_cost=total_labor,
            total_overhead_cost=total_overhead,
            total_cost=total_cost,
            profit_margin=profit_margin,
            suggested_wholesale_price=wholesale,
            suggested_retail_price=retail,
            fair_wage_rate=rates.recommended_hourly_rate if rates else 0,
            is_fair_wage=self.is_using_fair_wage(priced_labor, rates),
            living_wage_comparison=self.compare_to_living_wage(priced_labor, rates) if rates else None,
        )

    def save_calculation(self, email: str, calculation: PricingCalculation) -> PricingCalculation:
        """
        Save a calculation for later

        Raises:
            ValidationError: if the calculation has no product name
        """
        if not calculation.product_name or not calculation.product_name.strip():
            raise ValidationError("El nombre del producto es requerido para guardar el cálculo")

        saved = calculation.model_copy(update={
            "id": calculation.id or f"calc-{uuid.uuid4().hex[:12]}",
            "created_at": calculation.created_at or utc_now_iso(),
        })
        self.repo.save_calculation(email, saved)
        logger.info(f"Pricing calculation saved for {email}: {saved.product_name}")
        return saved

    def list_calculations(self, email: str) -> List[PricingCalculation]:
        return self.repo.find_calculations(email)
