"""
Domain Layer - Business Entities

This layer contains Pydantic models representing marketplace entities.
These models enforce type safety and validation across the application.
"""
from papalote.domain.product import Product, ProductFilters, PriceRange, SearchResult, SeasonalTheme
from papalote.domain.cart import CartItem
from papalote.domain.order import (
    OrderItem, ShippingAddress, SavedAddress, CompleteOrder, Coupon, AppliedCoupon, OrderSummary
)
from papalote.domain.seller import SellerProduct, Shop, Review, SellerMessage, SellerTask
from papalote.domain.verification import VerificationRequest
from papalote.domain.pricing import PricingCalculation, FairTradeRates
from papalote.domain.buyer import FavoriteProduct, Achievement, AchievementProgress, ImpactSummary
from papalote.domain.settings import PlatformSettings
from papalote.domain.user import User

__all__ = [
    'Product', 'ProductFilters', 'PriceRange', 'SearchResult', 'SeasonalTheme',
    'CartItem',
    'OrderItem', 'ShippingAddress', 'SavedAddress', 'CompleteOrder', 'Coupon', 'AppliedCoupon',
    'OrderSummary',
    'SellerProduct', 'Shop', 'Review', 'SellerMessage', 'SellerTask',
    'VerificationRequest',
    'PricingCalculation', 'FairTradeRates',
    'FavoriteProduct', 'Achievement', 'AchievementProgress', 'ImpactSummary',
    'PlatformSettings',
    'User',
]
