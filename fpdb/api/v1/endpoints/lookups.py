"""API endpoints for fixed library lookups."""

from fastapi import APIRouter, Query

from fpdb.api.dependencies import LookupServiceDep
from fpdb.models import AdditionalAppPublic, Stats

router = APIRouter()


@router.get(
    "/platforms",
    response_model=list[str],
    summary="List platforms",
    description="Retrieve the distinct platforms of all entries",
)
def list_platforms(lookup_service: LookupServiceDep) -> list[str]:
    """List all platforms."""
    return lookup_service.list_platforms()


@router.get(
    "/addapps",
    response_model=list[AdditionalAppPublic],
    summary="List additional applications",
    description="Retrieve the additional applications of an entry",
)
def list_additional_apps(
    lookup_service: LookupServiceDep,
    id: str | None = Query(None, description="ID of the parent entry"),
) -> list[AdditionalAppPublic]:
    """List additional applications of an entry."""
    if not id:
        return []
    return lookup_service.list_additional_apps(id)


@router.get(
    "/stats",
    response_model=Stats,
    summary="Library statistics",
    description="Entry counts per library, data format and platform",
)
def get_stats(lookup_service: LookupServiceDep) -> Stats:
    """Get library statistics."""
    return lookup_service.get_stats()
