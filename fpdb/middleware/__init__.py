"""HTTP middleware."""

from fpdb.middleware.activity_middleware import ActivityLogMiddleware

__all__ = ["ActivityLogMiddleware"]
