"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter

from app.catalog import get_catalog


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def check_catalog(self) -> dict:
        """Check catalog status."""
        catalog = get_catalog()
        if catalog is not None:
            return {"status": "healthy", "products": len(catalog)}
        return {"status": "not_loaded", "products": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check():
    """
    Health check endpoint.

    Returns system status including API and catalog.
    """
    controller = HealthController()
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness check for container orchestration."""
    return {"ready": get_catalog() is not None}


@router.get("/live")
async def liveness_check():
    """Liveness check for container orchestration."""
    return {"alive": True}
