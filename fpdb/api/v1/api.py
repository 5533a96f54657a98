"""API v1 router aggregator."""

from fastapi import APIRouter

from fpdb.api.v1.endpoints import lookups, search

# Create the main API v1 router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(search.router, tags=["search"])

api_router.include_router(lookups.router, tags=["lookups"])
