"""Business logic services."""

from fpdb.services.lookup_service import LookupService
from fpdb.services.query_compiler import QueryCompiler, parse_search_request
from fpdb.services.result_projector import ResultProjector
from fpdb.services.search_service import SearchService

__all__ = [
    "LookupService",
    "QueryCompiler",
    "ResultProjector",
    "SearchService",
    "parse_search_request",
]
