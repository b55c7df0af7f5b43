# API endpoints and routers

from .search_endpoints import router as search_router
from .ingestion_endpoints import router as ingestion_router
from .health_endpoints import router as health_router

__all__ = [
    "search_router",
    "ingestion_router",
    "health_router",
]
