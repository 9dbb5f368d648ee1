"""
Repository Layer - Data Access

This layer reads and writes the in-memory fixture store and returns domain models.
Repositories abstract away storage details from business logic.
"""
from papalote.repositories.product_repository import ProductRepository
from papalote.repositories.shop_repository import ShopRepository
from papalote.repositories.order_repository import OrderRepository
from papalote.repositories.address_repository import AddressRepository
from papalote.repositories.seller_product_repository import SellerProductRepository
from papalote.repositories.review_repository import ReviewRepository
from papalote.repositories.message_repository import MessageRepository
from papalote.repositories.verification_repository import VerificationRepository
from papalote.repositories.favorite_repository import FavoriteRepository
from papalote.repositories.pricing_repository import PricingRepository
from papalote.repositories.user_repository import UserRepository
from papalote.repositories.session_repository import SessionRepository
from papalote.repositories.catalog_repository import CatalogRepository

__all__ = [
    'ProductRepository',
    'ShopRepository',
    'OrderRepository',
    'AddressRepository',
    'SellerProductRepository',
    'ReviewRepository',
    'MessageRepository',
    'VerificationRepository',
    'FavoriteRepository',
    'PricingRepository',
    'UserRepository',
    'SessionRepository',
    'CatalogRepository',
]
