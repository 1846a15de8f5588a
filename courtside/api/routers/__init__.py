"""API routers for different resource types."""

from courtside.api.routers.schedule import router as schedule_router
from courtside.api.routers.free_agency import router as free_agency_router
from courtside.api.routers.trades import router as trades_router
from courtside.api.routers.ai import router as ai_router

__all__ = [
    "schedule_router",
    "free_agency_router",
    "trades_router",
    "ai_router",
]
