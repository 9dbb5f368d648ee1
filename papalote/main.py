"""
Papalote Market - Backend API
Marketplace de artesanías mexicanas
"""
import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables before settings are read
load_dotenv()

from papalote.api import (
    admin,
    auth,
    buyer,
    cart,
    checkout,
    favorites,
    maintenance,
    pricing,
    products,
    seller,
    shops,
    verification,
)
from papalote.api.middleware import MaintenanceMiddleware
from papalote.core.config import settings
from papalote.core.errors import register_exception_handlers
from papalote.core.rate_limit import RateLimitMiddleware
from papalote.core.storage import get_store
from papalote.services.maintenance_service import is_maintenance_mode


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

register_exception_handlers(app)

# Last added runs first: CORS -> rate limit -> maintenance
app.add_middleware(MaintenanceMiddleware)
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Include API routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(shops.router, prefix="/api/shops", tags=["Shops"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/api/checkout", tags=["Checkout"])
app.include_router(buyer.router, prefix="/api/buyer", tags=["Buyer"])
app.include_router(favorites.router, prefix="/api/favorites", tags=["Favorites"])
app.include_router(pricing.router, prefix="/api/pricing", tags=["Pricing"])
app.include_router(verification.router, prefix="/api/seller/verification", tags=["Seller Verification"])
app.include_router(seller.router, prefix="/api/seller", tags=["Seller"])
app.include_router(maintenance.router, prefix="/api/maintenance", tags=["Maintenance"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Papalote Market API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
    }


@app.get("/health")
async def health():
    """Health check endpoint para monitoreo"""
    start_time = time.time()
    counts = get_store().counts()
    latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy",
        "version": settings.API_VERSION,
        "maintenanceMode": is_maintenance_mode(),
        "data": counts,
        "latencyMs": latency_ms,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("papalote.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.API_DEBUG)
