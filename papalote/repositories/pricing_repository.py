"""
Pricing Repository - fair trade rates and saved pricing calculations
"""
from typing import List, Optional

from papalote.core.storage import DataStore, get_store
from papalote.domain.pricing import FairTradeRates, PricingCalculation


class PricingRepository:
    """Regional wage references and each seller's saved calculations"""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store or get_store()

    def find_rates(self, region: str) -> Optional[FairTradeRates]:
        """
        Find fair trade rates for a region

        Args:
            region: Region key (e.g., "oaxaca")

        Returns:
            FairTradeRates or None if the region is unknown
        """
        region_lower = region.lower()
        for row in self.store.fair_trade_rates:
            if row['region'] == region_lower:
                return FairTradeRates.model_validate(row)
        return None

    def find_all_rates(self) -> List[FairTradeRates]:
        return [FairTradeRates.model_validate(row) for row in self.store.fair_trade_rates]

    def find_calculations(self, email: str) -> List[PricingCalculation]:
        """Saved calculations for a seller, newest first"""
        rows = self.store.pricing_calculations.get(email.lower(), [])
        return [PricingCalculation.model_validate(row) for row in rows]

    def save_calculation(self, email: str, calculation: PricingCalculation) -> PricingCalculation:
        rows = self.store.pricing_calculations.setdefault(email.lower(), [])
        rows.insert(0, calculation.to_dict())
        return calculation
