"""
Configuración centralizada de la aplicación
"""
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Papalote Market API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "API del marketplace Papalote Market"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True

    LOG_LEVEL: str = "INFO"

    # Fixtures JSON (no hay base de datos)
    DATA_DIR: Path = PACKAGE_DIR / "data"

    # Auth
    AUTH_SECRET: str = "papalote-dev-secret-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Rate limits (requests per minute)
    RATE_LIMIT_DEFAULT: int = 300
    RATE_LIMIT_AUTHENTICATED: int = 1000
    RATE_LIMIT_LOGIN: int = 10

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://papalote.mx" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:3001"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
