"""Application configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fpdb.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Flashpoint Search API"
    APP_VERSION: str = Field(default=__version__)
    APP_DESCRIPTION: str = "Read-only metadata search over a Flashpoint game library"
    DEBUG: bool = Field(default=False)

    # Server settings
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=8986)

    # Database settings - Full connection string
    DATABASE_URL: str | None = Field(default=None, description="Full database connection URL")

    # Database settings - SQLite file, opened read-only
    DATABASE_PATH: str = Field(default="flashpoint.sqlite")

    # Table layout
    BASE_TABLE: str = Field(default="game", description="Table holding one row per entry")
    BASE_KEY: str = Field(default="id", description="Entry identifier column on BASE_TABLE")
    JOIN_TABLE: str | None = Field(
        default=None,
        description="Secondary table joined (LEFT JOIN) when a field requires it",
    )
    JOIN_KEY: str = Field(
        default="gameId",
        description="Column on JOIN_TABLE referencing BASE_TABLE.BASE_KEY",
    )

    # Field registry
    FIELDS_FILE: Path | None = Field(
        default=None,
        description="JSON file with the field registry. The built-in registry is used if unset",
    )

    # Search settings
    SEARCH_LIMIT: int = Field(
        default=-1,
        description="Maximum number of rows returned by a search. Nonpositive means unlimited",
    )
    FILTER: list[str] = Field(
        default_factory=list,
        description="Tags excluded from results when a search sets filter=true",
    )

    # Logging settings
    LOG_FILE: str | None = Field(default=None, description="Log to this file instead of stdout")
    LOG_ACTIVITY: bool = Field(default=False, description="Log every served request")
    LOG_LEVEL: str = Field(default="INFO")

    # CORS settings
    CORS_ORIGINS: list[str] = Field(default=["*"])

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///file:{self.DATABASE_PATH}?mode=ro&uri=true"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return settings
