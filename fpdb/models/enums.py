"""Enum definitions for field types and filter combination."""

import enum


class FieldType(str, enum.Enum):
    """Output type of a registered field."""

    STRING = "string"
    ARRAY = "array"
    BOOL = "bool"


class CombinationMode(str, enum.Enum):
    """How filter groups of a search are combined."""

    AND = "AND"
    OR = "OR"

    @property
    def operator(self) -> str:
        """SQL operator joining predicates in this mode."""
        return f" {self.value} "
