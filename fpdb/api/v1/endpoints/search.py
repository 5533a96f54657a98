"""API endpoint for searching library entries."""

from typing import Any

from fastapi import APIRouter, Request

from fpdb.api.dependencies import SearchServiceDep

router = APIRouter()


@router.get(
    "/search",
    response_model=list[dict[str, Any]],
    summary="Search library entries",
    description=(
        "Filter entries by any registered field (comma-separated values, substring match). "
        "smartSearch matches terms across title, alternate titles, series, developer and "
        "publisher. fields selects the returned fields, any=true combines filters with OR, "
        "filter=true hides blocklisted tags, tagsStr requires (or with any=true, allows) "
        "tags, and limit caps the number of rows. A request without filters returns []."
    ),
)
def search_entries(request: Request, search_service: SearchServiceDep) -> list[dict[str, Any]]:
    """Search entries with the filters given as query parameters."""
    return search_service.search(request.query_params)
