"""API routes package."""

from fastapi import APIRouter

from card_gateway.api.routes.cards import router as cards_router
from card_gateway.api.routes.health import router as health_router

# Create API router with all sub-routers
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(cards_router)


__all__ = [
    "api_router",
    "cards_router",
    "health_router",
]
