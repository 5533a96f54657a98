"""Response schemas for the lookup endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class AdditionalAppPublic(BaseModel):
    """Public schema for an additional application."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    applicationPath: str
    launchCommand: str
    runBefore: bool = Field(..., description="Run before the parent game starts")


class ColumnStats(BaseModel):
    """Number of entries sharing one column value."""

    name: str
    count: int


class Stats(BaseModel):
    """Library totals grouped by library, data format and platform."""

    libraryTotals: list[ColumnStats] = Field(default_factory=list)
    formatTotals: list[ColumnStats] = Field(default_factory=list)
    platformTotals: list[ColumnStats] = Field(default_factory=list)
