"""Field descriptor model for the field registry."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fpdb.models.enums import FieldType


class FieldDescriptor(BaseModel):
    """A searchable and returnable attribute of a library entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str = Field(
        ...,
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Query parameter key and JSON output key",
    )
    source_expression: str = Field(
        ...,
        alias="sourceExpression",
        min_length=1,
        description="SQL expression producing the value",
    )
    filter_column: str = Field(
        ...,
        alias="filterColumn",
        min_length=1,
        description="SQL expression matched with LIKE when filtering",
    )
    requires_join: bool = Field(default=False, alias="requiresJoin")
    type: FieldType = Field(default=FieldType.STRING)

    @model_validator(mode="before")
    @classmethod
    def default_filter_column(cls, data: Any) -> Any:
        """Filter on the source expression unless told otherwise."""
        if isinstance(data, dict):
            has_filter = data.get("filterColumn") or data.get("filter_column")
            if not has_filter:
                source = data.get("sourceExpression", data.get("source_expression"))
                data = {**data, "filterColumn": source}
                data.pop("filter_column", None)
        return data
