"""Decode, post-filter and serialize search result rows."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from fpdb.core.exceptions import RowDecodeError
from fpdb.core.field_registry import FieldRegistry
from fpdb.models import CombinationMode, CompiledQuery, FieldDescriptor, FieldType, SearchRequest

logger = logging.getLogger(__name__)

LIST_DELIMITER = "; "

JsonValue = str | list[str] | bool


def decode_text(descriptor: FieldDescriptor, raw: Any) -> str:
    """Read a database value as text."""
    if raw is None:
        return ""
    if isinstance(raw, bytes | bytearray | memoryview):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RowDecodeError(descriptor.name, raw, "not valid UTF-8") from e
    return str(raw)


def render_value(descriptor: FieldDescriptor, raw: str) -> JsonValue:
    """
    Convert a raw text value to the JSON value of the field's type.

    An empty array value renders as [""], not [].
    """
    if descriptor.type == FieldType.ARRAY:
        return raw.split(LIST_DELIMITER)

    if descriptor.type == FieldType.BOOL:
        token = raw.strip().strip("\"'").lower()
        if token == "true":
            return True
        if token == "false":
            return False
        raise RowDecodeError(descriptor.name, raw, "not a boolean")

    return raw


class ResultProjector:
    """Turns rows of a compiled search into JSON-ready objects."""

    def __init__(self, registry: FieldRegistry, blocklist: Iterable[str] = ()):
        self.registry = registry
        self.blocklist = frozenset(blocklist)

    def keep(self, tags: Sequence[str], request: SearchRequest) -> bool:
        """Apply the blocklist and the requested tag match to a row's tags."""
        if request.filter_blocklist and any(tag in self.blocklist for tag in tags):
            return False

        if request.tags:
            row_tags = {tag.lower() for tag in tags}
            if request.mode == CombinationMode.OR:
                return any(tag.lower() in row_tags for tag in request.tags)
            return all(tag.lower() in row_tags for tag in request.tags)

        return True

    def project(
        self,
        compiled: CompiledQuery,
        request: SearchRequest,
        rows: Iterable[Sequence[Any]],
    ) -> list[dict[str, JsonValue]]:
        """
        Project rows into output objects.

        A row that cannot be decoded ends the projection; objects built
        from earlier rows are still returned.
        """
        descriptors = [self.registry.lookup(name) for name in compiled.output_fields]
        results: list[dict[str, JsonValue]] = []

        try:
            for row in rows:
                values = [decode_text(field, raw) for field, raw in zip(descriptors, row)]
                tags = values[compiled.tags_index].split(LIST_DELIMITER)
                if not self.keep(tags, request):
                    continue

                fields = list(zip(descriptors, values))
                if compiled.tags_appended:
                    del fields[compiled.tags_index]

                results.append({field.name: render_value(field, raw) for field, raw in fields})
        except RowDecodeError as e:
            logger.error("stopped reading search results after %d rows: %s", len(results), e)

        return results
