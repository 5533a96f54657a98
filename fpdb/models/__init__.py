"""Database models and schemas for the Flashpoint Search API."""

from fpdb.models.enums import CombinationMode, FieldType
from fpdb.models.field import FieldDescriptor
from fpdb.models.game import AdditionalApp, Game
from fpdb.models.lookup import AdditionalAppPublic, ColumnStats, Stats
from fpdb.models.search import CompiledQuery, SearchRequest

__all__ = [
    # Enums
    "CombinationMode",
    "FieldType",
    # Field registry
    "FieldDescriptor",
    # Tables
    "Game",
    "AdditionalApp",
    # Lookups
    "AdditionalAppPublic",
    "ColumnStats",
    "Stats",
    # Search
    "SearchRequest",
    "CompiledQuery",
]
