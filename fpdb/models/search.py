"""Search request and compiled query models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fpdb.models.enums import CombinationMode


class SearchRequest(BaseModel):
    """Search parameters decoded from one HTTP request."""

    mode: CombinationMode = Field(default=CombinationMode.AND)
    smart_search: list[str] = Field(default_factory=list)
    filters: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Registered field name to raw filter values",
    )
    output_fields: list[str] = Field(
        default_factory=list,
        description="Requested output field names, unresolved. Empty means all fields",
    )
    limit: str | None = Field(default=None, description="Raw caller row cap")
    filter_blocklist: bool = Field(default=False)
    tags: list[str] = Field(default_factory=list, description="Tags to match")


class CompiledQuery(BaseModel):
    """A parameterized statement and the metadata needed to project its rows."""

    model_config = ConfigDict(frozen=True)

    sql: str
    parameters: tuple[str, ...] = ()
    output_fields: tuple[str, ...] = Field(
        ..., description="Selected field names in column order, tag column included"
    )
    tags_index: int = Field(..., description="Position of the tag column in output_fields")
    tags_appended: bool = Field(
        default=False, description="Tag column was added for post-filtering only"
    )
    uses_join: bool = False
    limit: int | None = None

    @property
    def bind_params(self) -> dict[str, Any]:
        """Bound parameters keyed by the placeholder names used in sql."""
        return {param_name(i): value for i, value in enumerate(self.parameters, start=1)}


def param_name(position: int) -> str:
    """Placeholder name of the bound parameter at a 1-based position."""
    return f"p{position}"
