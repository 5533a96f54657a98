"""API v1 endpoint routers."""

from fpdb.api.v1.endpoints import lookups, search

__all__ = [
    "lookups",
    "search",
]
