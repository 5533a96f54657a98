"""Immutable catalog of the fields a search can filter on and return."""

import json
import logging
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from fpdb.core.config import Settings
from fpdb.core.exceptions import ConfigurationError, FieldRegistryError
from fpdb.models.field import FieldDescriptor

logger = logging.getLogger(__name__)

TAGS_FIELD = "tags"

# Query parameters with a fixed meaning; no field may shadow them
RESERVED_PARAMETERS = frozenset({"fields", "any", "filter", "limit", "smartSearch", "tagsStr"})

DEFAULT_FIELDS_RESOURCE = "default_fields.json"

_descriptor_list = TypeAdapter(list[FieldDescriptor])


class FieldRegistry:
    """
    Ordered, read-only set of field descriptors.

    Registry order is the default output order of a search. Descriptors are
    validated when the registry is built so a bad configuration fails before
    any request is served.
    """

    def __init__(self, descriptors: Iterable[FieldDescriptor], join_table: str | None = None):
        self._fields: tuple[FieldDescriptor, ...] = tuple(descriptors)
        self._positions: dict[str, int] = {}

        if not self._fields:
            raise FieldRegistryError("no fields configured")

        for position, descriptor in enumerate(self._fields):
            if descriptor.name in self._positions:
                raise FieldRegistryError("duplicate field name", descriptor.name)
            if descriptor.name in RESERVED_PARAMETERS:
                raise FieldRegistryError("name is a reserved query parameter", descriptor.name)
            if descriptor.requires_join and not join_table:
                raise FieldRegistryError(
                    "requires a join but no JOIN_TABLE is configured", descriptor.name
                )
            self._positions[descriptor.name] = position

        self._tags_index = self._positions.get(TAGS_FIELD)

    @classmethod
    def from_config(
        cls, raw_fields: list[dict[str, Any]], join_table: str | None = None
    ) -> "FieldRegistry":
        """Build a registry from the decoded JSON configuration list."""
        try:
            descriptors = _descriptor_list.validate_python(raw_fields)
        except ValidationError as e:
            raise FieldRegistryError(f"invalid field configuration: {e}") from e
        return cls(descriptors, join_table=join_table)

    def lookup(self, name: str) -> FieldDescriptor | None:
        """Get a descriptor by exact name."""
        position = self._positions.get(name)
        return None if position is None else self._fields[position]

    def all(self) -> tuple[FieldDescriptor, ...]:
        """All descriptors in registry order."""
        return self._fields

    def names(self) -> list[str]:
        """All field names in registry order."""
        return [descriptor.name for descriptor in self._fields]

    def tags_field_index(self) -> int:
        """
        Position of the tags field in the registry.

        Raises:
            ConfigurationError: If no field is named "tags"
        """
        if self._tags_index is None:
            raise ConfigurationError(f"field registry has no '{TAGS_FIELD}' field")
        return self._tags_index

    @property
    def tags_field(self) -> FieldDescriptor:
        """Descriptor of the tags field."""
        return self._fields[self.tags_field_index()]

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


def read_fields_config(fields_file: Path | None) -> list[dict[str, Any]]:
    """Read the raw registry list from fields_file or the built-in resource."""
    try:
        if fields_file is None:
            raw = resources.files("fpdb.core").joinpath(DEFAULT_FIELDS_RESOURCE).read_text(
                encoding="utf-8"
            )
        else:
            raw = Path(fields_file).read_text(encoding="utf-8")
        data = json.loads(raw)
    except OSError as e:
        raise FieldRegistryError(f"cannot read {fields_file}: {e}") from e
    except json.JSONDecodeError as e:
        raise FieldRegistryError(f"cannot parse field configuration: {e}") from e

    if not isinstance(data, list):
        raise FieldRegistryError("field configuration must be a JSON list")
    return data


def load_field_registry(settings: Settings) -> FieldRegistry:
    """
    Load the field registry described by settings.

    Raises:
        FieldRegistryError: If the configuration is missing or invalid
    """
    registry = FieldRegistry.from_config(
        read_fields_config(settings.FIELDS_FILE), join_table=settings.JOIN_TABLE
    )
    if TAGS_FIELD not in registry:
        logger.warning("field registry has no '%s' field; filtered searches will fail", TAGS_FIELD)

    logger.info(
        "loaded %d fields from %s",
        len(registry),
        settings.FIELDS_FILE or "built-in registry",
    )
    return registry
