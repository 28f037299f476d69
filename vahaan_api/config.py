"""
API configuration and settings management.
"""
import os
from typing import Optional

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))

# Loads the .env file from the project root, if there is one.
load_dotenv(os.path.join(basedir, '..', '.env'))

DEFAULT_FRONTEND_ORIGINS = ["http://localhost:5173", "https://vahaanxchange.vercel.app"]
DEFAULT_FRONTEND_BASE_URL = "https://vahaanxchange.vercel.app"


class Config:
    """Application configuration."""

    # Store (Supabase). Both are required, there is no fallback.
    SUPABASE_URL: Optional[str] = os.getenv("SUPABASE_URL")
    SUPABASE_ANON_KEY: Optional[str] = os.getenv("SUPABASE_ANON_KEY")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT") or 3001)
    APP_ENV: str = os.getenv("APP_ENV", "production")

    # API settings
    API_TITLE: str = "VahaanXchange Backend"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Vehicle data and social sharing pages for VahaanXchange"
    SERVICE_NAME: str = "VahaanXchange Backend"

    # Frontend / CORS
    FRONTEND_URL: Optional[str] = os.getenv("FRONTEND_URL") or None
    CORS_ORIGINS: list = [FRONTEND_URL] if FRONTEND_URL else DEFAULT_FRONTEND_ORIGINS
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]
    FRONTEND_BASE_URL: str = (FRONTEND_URL or DEFAULT_FRONTEND_BASE_URL).rstrip("/")

    # Share page
    SITE_NAME: str = "VahaanXchange"
    SITE_LOCALE: str = "en_IN"
    PLACEHOLDER_IMAGE_URL: str = (
        "https://www.vahaanxchange.com/resource-uploads/"
        "a47ef4ec-4126-4237-8391-444437db8ec1.png"
    )
    OG_IMAGE_WIDTH: int = 1200
    OG_IMAGE_HEIGHT: int = 630

    # Compression
    GZIP_MINIMUM_SIZE: int = 1000

    # Applied to every response
    SECURITY_HEADERS: dict = {
        "X-DNS-Prefetch-Control": "off",
        "X-Frame-Options": "SAMEORIGIN",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-Download-Options": "noopen",
        "X-Content-Type-Options": "nosniff",
        "X-Permitted-Cross-Domain-Policies": "none",
        "Referrer-Policy": "no-referrer",
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
        "Origin-Agent-Cluster": "?1",
        "X-XSS-Protection": "0",
    }

    AVAILABLE_ROUTES: list = [
        "/health",
        "/api/vehicles/:type/:id",
        "/api/meta/:type/:id",
        "/ssr/:type/:id",
    ]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() == "development"

    def validate(self) -> None:
        """Validate configuration on startup."""
        missing = [name for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY") if not getattr(self, name)]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

# Global config instance
config = Config()
