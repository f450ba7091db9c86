"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from tagfeed.api.v1.dependencies.
"""

from fastapi import APIRouter

from tagfeed.api.v1.endpoints import directories, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(directories.router, prefix="/directories", tags=["directories"])
