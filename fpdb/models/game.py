"""Library tables of the Flashpoint database."""

from sqlmodel import Field, SQLModel


class Game(SQLModel, table=True):
    """Game database model."""

    __tablename__ = "game"

    id: str = Field(primary_key=True)
    title: str = Field(default="")
    alternateTitles: str = Field(default="")
    series: str = Field(default="")
    developer: str = Field(default="")
    publisher: str = Field(default="")
    dateAdded: str = Field(default="")
    dateModified: str = Field(default="")
    platform: str = Field(default="", index=True)
    playMode: str = Field(default="")
    status: str = Field(default="")
    notes: str = Field(default="")
    source: str = Field(default="")
    applicationPath: str = Field(default="")
    launchCommand: str = Field(default="")
    releaseDate: str = Field(default="")
    version: str = Field(default="")
    originalDescription: str = Field(default="")
    language: str = Field(default="")
    library: str = Field(default="")
    activeDataOnDisk: bool = Field(default=False)
    tagsStr: str = Field(default="")


class AdditionalApp(SQLModel, table=True):
    """Additional application launched alongside a game."""

    __tablename__ = "additional_app"

    id: str = Field(primary_key=True)
    applicationPath: str = Field(default="")
    autoRunBefore: bool = Field(default=False)
    launchCommand: str = Field(default="")
    name: str = Field(default="")
    parentGameId: str = Field(foreign_key="game.id", index=True)
