"""Search service for querying library entries by configured fields."""

import logging
from collections.abc import Mapping

from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fpdb.core.config import Settings
from fpdb.core.exceptions import QueryExecutionError
from fpdb.core.field_registry import FieldRegistry
from fpdb.models import CompiledQuery, SearchRequest
from fpdb.services.query_compiler import QueryCompiler, parse_search_request
from fpdb.services.result_projector import JsonValue, ResultProjector

logger = logging.getLogger(__name__)


class SearchService:
    """Service for searching library entries."""

    def __init__(self, db: Session, registry: FieldRegistry, settings: Settings):
        self.db = db
        self.registry = registry
        self.compiler = QueryCompiler.from_settings(registry, settings)
        self.projector = ResultProjector(registry, settings.FILTER)

    def parse_request(self, query_params: Mapping[str, str]) -> SearchRequest:
        """Decode raw query parameters against the field registry."""
        return parse_search_request(query_params, self.registry)

    def search(
        self, query_params: Mapping[str, str], force_join: bool = False
    ) -> list[dict[str, JsonValue]]:
        """
        Run a search described by HTTP query parameters.

        Args:
            query_params: Raw query parameters of the request
            force_join: Join the secondary table even if no field needs it

        Returns:
            Result objects in database order. Empty if no filter was given

        Raises:
            QueryExecutionError: If the database fails the statement
            ConfigurationError: If the registry has no tags field
        """
        request = self.parse_request(query_params)
        compiled = self.compiler.compile(request, force_join=force_join)
        if compiled is None:
            return []

        try:
            rows = self.execute(compiled)
            return self.projector.project(compiled, request, rows)
        except SQLAlchemyError as e:
            logger.exception("search query failed: %s", compiled.sql)
            raise QueryExecutionError(str(e)) from e

    def execute(self, compiled: CompiledQuery) -> Result:
        """Execute a compiled statement with its bound parameters."""
        statement = text(compiled.sql)
        if compiled.parameters:
            statement = statement.bindparams(**compiled.bind_params)
        return self.db.exec(statement)
