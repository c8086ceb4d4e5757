from fastapi import APIRouter

from link_cards.api.v1 import link_preview

api_router = APIRouter(prefix="/api")
api_router.include_router(link_preview.router)

__all__ = ["api_router"]
