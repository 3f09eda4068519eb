"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from cubify.api.v1.routes import competitors, compare

api_router = APIRouter()

api_router.include_router(competitors.router)
api_router.include_router(compare.router)
