"""Durable storage for mode playlists."""

import os
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    String,
    create_engine,
    delete,
    func,
    select,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from . import config
from .errors import ConstraintError, StorageError
from .logging_config import get_logger
from .modes import MODE_VALUES, Mode, is_valid_mode

logger = get_logger(__name__)

Base = declarative_base()

_MODE_CHECK = "mode IN ({})".format(", ".join(f"'{value}'" for value in MODE_VALUES))


class PlaylistEntry(Base):
    """A video registered under a playback mode."""

    __tablename__ = "urls"
    __table_args__ = (
        CheckConstraint(_MODE_CHECK, name="ck_urls_mode"),
        Index("idx_mode", "mode"),
        {"sqlite_autoincrement": True},  # never reuse ids of deleted rows
    )

    id = Column(Integer, primary_key=True)
    mode = Column(String(16), nullable=False)
    video_id = Column(String(11), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the entry the way the web API returns it."""
        return {"id": self.id, "mode": self.mode, "videoId": self.video_id}

    def __repr__(self):
        return f"<PlaylistEntry(id={self.id}, mode='{self.mode}', video_id='{self.video_id}')>"


def create_db_engine(database_url: str, timeout: float = config.DB_TIMEOUT) -> Engine:
    """Create a SQLAlchemy engine for the playlist database.

    Args:
        database_url: SQLAlchemy database URL
        timeout: Seconds to wait on a locked SQLite database before failing

    Returns:
        Engine: Configured engine
    """
    url = make_url(database_url)
    kwargs: Dict[str, Any] = {}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": timeout}
        if url.database in (None, "", ":memory:"):
            # Every session must see the same in-memory database
            kwargs["poolclass"] = StaticPool
        else:
            directory = os.path.dirname(url.database)
            if directory:
                os.makedirs(directory, exist_ok=True)

    return create_engine(url, **kwargs)


class PlaylistStore:
    """Mode-partitioned playlist storage backed by a relational database."""

    def __init__(self, database_url: Optional[str] = None):
        """Initialize the store and create the schema if needed.

        Args:
            database_url: SQLAlchemy URL, defaults to config.DATABASE_URL
        """
        self.engine = create_db_engine(database_url or config.DATABASE_URL)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to initialize database: {str(e)}") from e
        logger.debug("Playlist store ready at %s", self.engine.url)

    def list_by_mode(self, mode: Union[Mode, str]) -> List[PlaylistEntry]:
        """Get all entries for a mode in insertion order.

        Args:
            mode: Playback mode

        Returns:
            Entries ordered by creation time, then id. Empty for an unknown
            or empty mode.

        Raises:
            StorageError: If the database query fails
        """
        value = mode.value if isinstance(mode, Mode) else mode
        stmt = (
            select(PlaylistEntry)
            .where(PlaylistEntry.mode == value)
            .order_by(PlaylistEntry.created_at, PlaylistEntry.id)
        )
        try:
            with self._session_factory() as session:
                return list(session.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list videos for mode {value}: {str(e)}") from e

    def insert(self, mode: Union[Mode, str], video_id: str) -> PlaylistEntry:
        """Insert a video under a mode.

        Args:
            mode: Playback mode
            video_id: Canonical video ID

        Returns:
            The new entry with its id and creation time assigned

        Raises:
            ConstraintError: If mode is not one of the playback modes
            StorageError: If the database write fails
        """
        if not is_valid_mode(mode):
            raise ConstraintError(mode)

        entry = PlaylistEntry(mode=Mode(mode).value, video_id=video_id)
        try:
            with self._session_factory() as session:
                with session.begin():
                    session.add(entry)
                session.refresh(entry)
        except IntegrityError as e:
            raise ConstraintError(mode) from e
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to add video {video_id}: {str(e)}") from e

        logger.debug("Stored %s under %s with id %d", video_id, entry.mode, entry.id)
        return entry

    def insert_many(self, entries: Sequence[Tuple[Union[Mode, str], str]]) -> List[PlaylistEntry]:
        """Insert several videos in one transaction. Either all are stored or none.

        Args:
            entries: (mode, video ID) pairs in insertion order

        Returns:
            The new entries in insertion order

        Raises:
            ConstraintError: If any mode is not one of the playback modes
            StorageError: If the database write fails
        """
        created: List[PlaylistEntry] = []
        try:
            with self._session_factory() as session:
                with session.begin():
                    for mode, video_id in entries:
                        if not is_valid_mode(mode):
                            raise ConstraintError(mode)
                        entry = PlaylistEntry(mode=Mode(mode).value, video_id=video_id)
                        session.add(entry)
                        session.flush()
                        created.append(entry)
                for entry in created:
                    session.refresh(entry)
        except IntegrityError as e:
            raise ConstraintError() from e
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to add videos: {str(e)}") from e

        return created

    def remove(self, entry_id: int) -> bool:
        """Delete an entry by id. Deleting a missing id does nothing.

        Args:
            entry_id: Id of the entry to delete

        Returns:
            bool: True if a row was deleted

        Raises:
            StorageError: If the database write fails
        """
        try:
            with self._session_factory() as session:
                with session.begin():
                    result = session.execute(
                        delete(PlaylistEntry).where(PlaylistEntry.id == entry_id)
                    )
                    deleted = result.rowcount
        except OverflowError:
            # Beyond SQLite's 64-bit INTEGER range, so no such row can exist
            return False
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete entry {entry_id}: {str(e)}") from e

        return bool(deleted)

    def count(self) -> int:
        """Count entries across all modes."""
        try:
            with self._session_factory() as session:
                return session.scalar(select(func.count()).select_from(PlaylistEntry)) or 0
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to count entries: {str(e)}") from e

    def close(self) -> None:
        """Release pooled database connections."""
        self.engine.dispose()
