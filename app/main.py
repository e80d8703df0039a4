"""
==============================================================================
Product Catalog Lookup - Application Entry Point
==============================================================================

FastAPI application serving read-only catalog queries:
- Product listing and lookup by position
- Combined name/category/brand search (linear or indexed)
- Catalog statistics and health checks

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.api.router import api_router
from app.catalog.loader import catalog_summary, load_catalog


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading on startup
    - API docs, disabled in production
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Configuration to use (global settings if None)
        """
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog lookup by name, category and brand",
            lifespan=self._lifespan,
            docs_url=self._docs_url,
            redoc_url=None if self._settings.is_production else "/redoc",
        )

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        # Register root endpoint
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        logger.info("✅ Shutdown complete")

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        self._load_catalog()

        logger.info(f"Default search strategy: {self._settings.default_search_strategy}")
        if self._docs_url:
            logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}{self._docs_url}")

    def _load_catalog(self) -> None:
        """Load product catalog."""
        try:
            products_path = self._settings.products_path
            if products_path.exists():
                store = load_catalog(products_path)
                logger.info(f"✅ Catalog ready: {catalog_summary(store)}")
            else:
                logger.warning(f"⚠️ Products file not found: {products_path}")
        except Exception as e:
            logger.error(f"❌ Failed to load catalog: {e}")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the API documentation, or to health when docs are off."""
            return RedirectResponse(url=self._docs_url or "/api/v1/health")

    @property
    def _docs_url(self) -> Optional[str]:
        """Interactive docs path; None in production."""
        return None if self._settings.is_production else "/docs"

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
