"""API routes for rechart."""

from fastapi import APIRouter

from rechart.api.routes.process import router as process_router
from rechart.api.routes.health import router as health_router
from rechart.api.routes.charts import router as charts_router
from rechart.api.routes.diagrams import router as diagrams_router
from rechart.api.routes.sharing import router as sharing_router
from rechart.api.routes.dashboard import router as dashboard_router

# Main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(process_router, tags=["Processing"])
api_router.include_router(charts_router, prefix="/charts", tags=["Charts"])
api_router.include_router(diagrams_router, prefix="/diagrams", tags=["Diagrams"])
api_router.include_router(sharing_router, tags=["Sharing"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])

__all__ = ["api_router"]
