"""Shared fixtures: an in-memory library database and a test client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fpdb.api.dependencies import get_field_registry
from fpdb.core.config import Settings, get_settings
from fpdb.core.field_registry import FieldRegistry, read_fields_config
from fpdb.db.database import get_session
from fpdb.main import app
from fpdb.models import AdditionalApp, Game

JOIN_TABLE = "game_override"

OVERRIDE_FIELD = {
    "name": "overrideTitle",
    "sourceExpression": f"COALESCE({JOIN_TABLE}.title, game.title)",
    "filterColumn": f"{JOIN_TABLE}.title",
    "requiresJoin": True,
}

GAMES = [
    {
        "id": "g1",
        "title": "Alien Hominid",
        "developer": "The Behemoth",
        "publisher": "The Behemoth",
        "platform": "Flash",
        "library": "arcade",
        "tagsStr": "Action; Shooter",
        "activeDataOnDisk": True,
    },
    {
        "id": "g2",
        "title": "Bloons Tower Defense",
        "developer": "Ninja Kiwi",
        "platform": "Flash",
        "library": "arcade",
        "tagsStr": "Strategy; Tower Defense",
    },
    {
        "id": "g3",
        "title": "100% Orange Juice",
        "developer": "Orange_Juice",
        "platform": "HTML5",
        "library": "arcade",
        "tagsStr": "Board Game; Extreme",
        "activeDataOnDisk": True,
    },
    {
        "id": "g4",
        "title": "Snake_Game",
        "series": "Retro",
        "platform": "Shockwave",
        "library": "theatre",
        "tagsStr": "Action; Puzzle",
    },
    {
        "id": "g5",
        "title": "Caret ^ Quest",
        "developer": "Hat^Games",
        "platform": "Flash",
        "library": "arcade",
        "tagsStr": "Puzzle",
    },
    {
        "id": "g6",
        "title": "Untagged Thing",
        "platform": "Java",
        "library": "theatre",
        "tagsStr": "",
    },
]


@pytest.fixture(name="test_settings")
def test_settings_fixture() -> Settings:
    return Settings(
        _env_file=None,
        SEARCH_LIMIT=3,
        FILTER=["Extreme"],
        JOIN_TABLE=JOIN_TABLE,
        JOIN_KEY="gameId",
    )


@pytest.fixture(name="registry")
def registry_fixture() -> FieldRegistry:
    return FieldRegistry.from_config(
        [*read_fields_config(None), OVERRIDE_FIELD], join_table=JOIN_TABLE
    )


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        session.exec(
            text(f"CREATE TABLE {JOIN_TABLE} (gameId TEXT PRIMARY KEY, title TEXT)")
        )
        session.exec(
            text(f"INSERT INTO {JOIN_TABLE} (gameId, title) VALUES ('g2', 'Bloons TD Classic')")
        )
        for game in GAMES:
            session.add(Game(**game))
        session.add(
            AdditionalApp(
                id="a1",
                name="Manual",
                applicationPath="manual.html",
                launchCommand="http://example.com/manual.html",
                autoRunBefore=False,
                parentGameId="g1",
            )
        )
        session.commit()
        yield session

    engine.dispose()


@pytest.fixture(name="client")
def client_fixture(session: Session, registry: FieldRegistry, test_settings: Settings):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_field_registry] = lambda: registry
    app.dependency_overrides[get_settings] = lambda: test_settings

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
