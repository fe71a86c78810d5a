"""API v1 router configuration.

This module sets up the main API router and includes all sub-routers.
"""

from fastapi import APIRouter

from translation_hub.api.v1.auth import router as auth_router
from translation_hub.api.v1.translate import router as translate_router
from translation_hub.api.v1.translations import router as translations_router
from translation_hub.api.v1.users import router as users_router

api_router = APIRouter()

# Include routers
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(translations_router, prefix="/translations", tags=["translations"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(translate_router, prefix="/translate", tags=["translate"])
