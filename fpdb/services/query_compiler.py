"""Compile search parameters into a parameterized SELECT statement."""

import logging
from collections.abc import Iterable, Mapping

from fpdb.core.config import Settings
from fpdb.core.field_registry import FieldRegistry
from fpdb.models import CombinationMode, CompiledQuery, FieldDescriptor, SearchRequest
from fpdb.models.search import param_name
from fpdb.services.limit_policy import resolve_limit

logger = logging.getLogger(__name__)

LIKE_ESCAPE_CHAR = "^"

# Fields a smart search term is matched against
SMART_SEARCH_FIELDS = ("title", "alternateTitles", "series", "developer", "publisher")

_LIKE_ESCAPES = str.maketrans({"^": "^^", "%": "^%", "_": "^_"})


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so value only matches literally."""
    return value.translate(_LIKE_ESCAPES)


def like_pattern(value: str) -> str:
    """Substring LIKE pattern for value."""
    return f"%{escape_like(value)}%"


def split_values(raw_values: Iterable[str]) -> list[str]:
    """Split comma-separated parameter values, dropping empty ones."""
    return [value for raw in raw_values for value in raw.split(",") if value]


def _get_all(query_params: Mapping[str, str], key: str) -> list[str]:
    """All values of a query parameter, in request order."""
    if hasattr(query_params, "getlist"):
        return list(query_params.getlist(key))
    value = query_params.get(key)
    return [] if value is None else [value]


def _is_true(value: str | None) -> bool:
    return value is not None and value.lower() == "true"


def parse_search_request(
    query_params: Mapping[str, str], registry: FieldRegistry
) -> SearchRequest:
    """
    Decode HTTP query parameters into a SearchRequest.

    Only registered field names become filters; any other unknown
    parameter is ignored.
    """
    filters: dict[str, list[str]] = {}
    for descriptor in registry:
        values = split_values(_get_all(query_params, descriptor.name))
        if values:
            filters[descriptor.name] = values

    fields_param = query_params.get("fields")

    return SearchRequest(
        mode=CombinationMode.OR if _is_true(query_params.get("any")) else CombinationMode.AND,
        smart_search=split_values(_get_all(query_params, "smartSearch")),
        filters=filters,
        output_fields=[name for name in fields_param.split(",") if name] if fields_param else [],
        limit=query_params.get("limit"),
        filter_blocklist=_is_true(query_params.get("filter")),
        tags=split_values(_get_all(query_params, "tagsStr")),
    )


class QueryCompiler:
    """
    Builds search statements from a SearchRequest.

    Table and column text only ever comes from the field registry and the
    settings. Request values are always bound parameters.
    """

    def __init__(
        self,
        registry: FieldRegistry,
        base_table: str = "game",
        base_key: str = "id",
        join_table: str | None = None,
        join_key: str = "gameId",
        search_limit: int = -1,
    ):
        self.registry = registry
        self.base_table = base_table
        self.base_key = base_key
        self.join_table = join_table
        self.join_key = join_key
        self.search_limit = search_limit

    @classmethod
    def from_settings(cls, registry: FieldRegistry, settings: Settings) -> "QueryCompiler":
        """Create a compiler using the table layout and ceiling from settings."""
        return cls(
            registry,
            base_table=settings.BASE_TABLE,
            base_key=settings.BASE_KEY,
            join_table=settings.JOIN_TABLE,
            join_key=settings.JOIN_KEY,
            search_limit=settings.SEARCH_LIMIT,
        )

    def compile(self, request: SearchRequest, force_join: bool = False) -> CompiledQuery | None:
        """
        Compile request into a statement.

        Args:
            request: Decoded search parameters
            force_join: Join the secondary table even if no field needs it

        Returns:
            The compiled query, or None when the request has no filters

        Raises:
            ConfigurationError: If the request has filters but the registry has no tags field
        """
        mode = request.mode
        parameters: list[str] = []
        groups: list[str] = []
        filtered: list[FieldDescriptor] = []

        def predicate(descriptor: FieldDescriptor, value: str) -> str:
            parameters.append(like_pattern(value))
            placeholder = param_name(len(parameters))
            return f"{descriptor.filter_column} LIKE :{placeholder} ESCAPE '{LIKE_ESCAPE_CHAR}'"

        smart_fields = [
            descriptor
            for descriptor in map(self.registry.lookup, SMART_SEARCH_FIELDS)
            if descriptor is not None
        ]
        if smart_fields:
            for term in request.smart_search:
                groups.append(
                    "(" + " OR ".join(predicate(field, term) for field in smart_fields) + ")"
                )
                filtered.extend(smart_fields)

        field_filters = list(request.filters.items())
        # Substring pre-filter; exact tag matching happens on the rows
        if request.tags:
            field_filters.append((self.registry.tags_field.name, request.tags))

        for name, values in field_filters:
            descriptor = self.registry.lookup(name)
            if descriptor is None or not values:
                continue
            groups.append(
                "(" + mode.operator.join(predicate(descriptor, value) for value in values) + ")"
            )
            filtered.append(descriptor)

        if not groups:
            return None

        tags_field = self.registry.tags_field
        output = self.resolve_output_fields(request.output_fields)
        tags_appended = tags_field not in output
        if tags_appended:
            output.append(tags_field)

        uses_join = bool(self.join_table) and (
            force_join or any(field.requires_join for field in (*output, *filtered))
        )

        sql = (
            f"SELECT {', '.join(field.source_expression for field in output)}"
            f" FROM {self._from_clause(uses_join)}"
            f" WHERE {mode.operator.join(groups)}"
        )

        limit = resolve_limit(request.limit, self.search_limit)
        if limit:
            sql += f" LIMIT {limit}"

        logger.debug("compiled search: %s %s", sql, parameters)

        return CompiledQuery(
            sql=sql,
            parameters=tuple(parameters),
            output_fields=tuple(field.name for field in output),
            tags_index=output.index(tags_field),
            tags_appended=tags_appended,
            uses_join=uses_join,
            limit=limit,
        )

    def resolve_output_fields(self, names: Iterable[str]) -> list[FieldDescriptor]:
        """Resolve requested output names, defaulting to every field."""
        output: list[FieldDescriptor] = []
        for name in names:
            descriptor = self.registry.lookup(name)
            if descriptor is not None and descriptor not in output:
                output.append(descriptor)
        return output or list(self.registry.all())

    def _from_clause(self, uses_join: bool) -> str:
        if not uses_join:
            return self.base_table
        return (
            f"{self.base_table} LEFT JOIN {self.join_table}"
            f" ON {self.join_table}.{self.join_key} = {self.base_table}.{self.base_key}"
        )
