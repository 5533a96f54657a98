"""API v1."""

from fpdb.api.v1.api import api_router

__all__ = ["api_router"]
