"""
API v1 Router

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

from peerhaven.api.v1.endpoints.assistant import router as assistant_router
from peerhaven.api.v1.endpoints.categories import router as categories_router
from peerhaven.api.v1.endpoints.health import router as health_router
from peerhaven.api.v1.endpoints.helpers import router as helpers_router
from peerhaven.api.v1.endpoints.knowledge import router as knowledge_router
from peerhaven.api.v1.endpoints.resources import router as resources_router
from peerhaven.api.v1.endpoints.speech import router as speech_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(assistant_router, prefix="/assistant", tags=["Assistant"])
api_router.include_router(helpers_router, prefix="/helpers", tags=["Helpers"])
api_router.include_router(knowledge_router, prefix="/knowledge", tags=["Knowledge"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(resources_router, prefix="/resources", tags=["Resources"])
api_router.include_router(speech_router, prefix="/speech", tags=["Speech"])
