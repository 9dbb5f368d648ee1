"""
Buyer profile models: favorites, achievements and impact
"""
from typing import Optional

from papalote.domain.base import CamelModel


class FavoriteProduct(CamelModel):
    product_id: str
    name: str
    price: float
    image: Optional[str] = None
    maker: Optional[str] = None
    added_at: str


class Achievement(CamelModel):
    """
    Achievement definition

    metric is one of the BuyerMetrics keys (orders_count, artisans_count,
    states_count, favorites_count, reviews_count, categories_count).
    """
    id: str
    name: str
    description: str
    category: str
    points: int = 0
    metric: str
    threshold: int


class AchievementProgress(Achievement):
    progress: int
    percentage: float
    unlocked: bool
    unlocked_at: Optional[str] = None


class BuyerMetrics(CamelModel):
    orders_count: int = 0
    artisans_count: int = 0
    states_count: int = 0
    favorites_count: int = 0
    reviews_count: int = 0
    categories_count: int = 0


class ImpactSummary(CamelModel):
    total_spent: float
    orders_count: int
    items_count: int
    artisans_supported: int
    states_reached: int
    amount_to_artisans: float
    platform_commission: float
