"""Dependencies for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from fpdb.core.config import Settings, get_settings
from fpdb.core.exceptions import ConfigurationError
from fpdb.core.field_registry import FieldRegistry
from fpdb.db.database import get_session
from fpdb.services.lookup_service import LookupService
from fpdb.services.search_service import SearchService


def get_field_registry(request: Request) -> FieldRegistry:
    """Dependency for the field registry built at startup."""
    registry = getattr(request.app.state, "field_registry", None)
    if registry is None:
        raise ConfigurationError("field registry is not loaded")
    return registry


def get_search_service(
    db: Session = Depends(get_session),
    registry: FieldRegistry = Depends(get_field_registry),
    settings: Settings = Depends(get_settings),
) -> SearchService:
    """Dependency for getting SearchService."""
    return SearchService(db, registry, settings)


def get_lookup_service(db: Session = Depends(get_session)) -> LookupService:
    """Dependency for getting LookupService."""
    return LookupService(db)


# Service Type Aliases
SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]
LookupServiceDep = Annotated[LookupService, Depends(get_lookup_service)]
