"""Fixed lookups over the library tables."""

from sqlalchemy import func
from sqlmodel import Session, select

from fpdb.models import AdditionalApp, AdditionalAppPublic, ColumnStats, Game, Stats


class LookupService:
    """Service for platform, additional application and statistics lookups."""

    def __init__(self, db: Session):
        self.db = db

    def list_platforms(self) -> list[str]:
        """Distinct platform names."""
        statement = select(Game.platform).group_by(Game.platform)
        return list(self.db.exec(statement).all())

    def list_additional_apps(self, game_id: str) -> list[AdditionalAppPublic]:
        """
        Get the additional applications of a game.

        Args:
            game_id: ID of the parent game

        Returns:
            List of additional applications, empty if the game has none
        """
        statement = select(AdditionalApp).where(AdditionalApp.parentGameId == game_id)
        return [
            AdditionalAppPublic(
                id=app.id,
                name=app.name,
                applicationPath=app.applicationPath,
                launchCommand=app.launchCommand,
                runBefore=app.autoRunBefore,
            )
            for app in self.db.exec(statement).all()
        ]

    def get_stats(self) -> Stats:
        """Entry counts per library, data format and platform."""
        return Stats(
            libraryTotals=self._count_by(Game.library),
            formatTotals=[
                ColumnStats(name="gameZip" if active else "legacy", count=count)
                for active, count in self._group_counts(Game.activeDataOnDisk)
            ],
            platformTotals=self._count_by(Game.platform),
        )

    def _count_by(self, column) -> list[ColumnStats]:
        return [
            ColumnStats(name=str(value), count=count)
            for value, count in self._group_counts(column)
        ]

    def _group_counts(self, column) -> list[tuple]:
        statement = select(column, func.count()).group_by(column)
        return list(self.db.exec(statement).all())
