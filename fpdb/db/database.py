"""Database engine and session dependency."""

from collections.abc import Generator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from fpdb.core.config import settings
from fpdb.core.exceptions import ConfigurationError


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the shared engine for database_url."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Requests are served from FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.database_url, echo=settings.DEBUG)


def get_session() -> Generator[Session, None, None]:
    """Yield a database session for one request."""
    with Session(engine) as session:
        yield session


def verify_database(db_engine: Engine) -> None:
    """
    Check that the database can be opened.

    Raises:
        ConfigurationError: If no connection can be made
    """
    try:
        with db_engine.connect():
            pass
    except SQLAlchemyError as e:
        raise ConfigurationError(f"cannot open database {db_engine.url!r}: {e}") from e
