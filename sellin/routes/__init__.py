"""Sellin TN routes."""
from fastapi import APIRouter

from sellin.routes.api import router as api_router
from sellin.routes.pages import router as pages_router

router = APIRouter()
router.include_router(api_router)
router.include_router(pages_router)

__all__ = ["router"]
