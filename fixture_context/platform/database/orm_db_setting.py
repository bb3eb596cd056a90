"""
SQLAlchemy engine and session management for fixture persistence

This module provides:
1. EngineManager: lazily creates a single engine per database URL
2. Database: session factory handed to the DI container
3. Base: declarative base for models loaded from fixtures

Fixture loading is synchronous, so plain (non-async) sessions are used.
In-memory SQLite URLs share one connection (StaticPool) so that tables
created by a test are visible to the sessions opened afterwards.
"""

from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fixture_context.platform.config.core_setting import settings
from fixture_context.platform.logging.loguru_io import Logger


def _is_in_memory_sqlite(url: str) -> bool:
    return url in ('sqlite://', 'sqlite:///:memory:') or url.endswith(':memory:')


class EngineManager:
    def __init__(self) -> None:
        self._engines: dict[str, Engine] = {}

    def get_engine(self, url: Optional[str] = None) -> Engine:
        url = url or settings.DATABASE_URL
        if url not in self._engines:
            Logger.base.info(f'🔗 [DB] Creating engine for {url}')
            self._engines[url] = self._create_engine(url)
        return self._engines[url]

    def _create_engine(self, url: str) -> Engine:
        if _is_in_memory_sqlite(url):
            return create_engine(
                url,
                echo=settings.DATABASE_ECHO,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool,
            )
        return create_engine(url, echo=settings.DATABASE_ECHO, pool_pre_ping=True)


# Global engine manager
_engine_manager = EngineManager()


def get_engine(url: Optional[str] = None) -> Engine:
    return _engine_manager.get_engine(url)


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


def create_db_and_tables(url: Optional[str] = None) -> None:
    """Create tables for every model registered on Base"""
    Base.metadata.create_all(get_engine(url), checkfirst=True)


def drop_db_and_tables(url: Optional[str] = None) -> None:
    Base.metadata.drop_all(get_engine(url), checkfirst=True)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Session factory bound to one database URL

    The container keeps one Database per process; each scenario opens its own
    session through session() so nothing is shared across scenarios.
    """

    def __init__(self, *, url: Optional[str] = None) -> None:
        self._url = url
        self._session_maker: Optional[sessionmaker[Session]] = None

    @property
    def engine(self) -> Engine:
        return get_engine(self._url)

    def session(self) -> Session:
        if self._session_maker is None:
            self._session_maker = sessionmaker(self.engine, expire_on_commit=False)
        return self._session_maker()


def init_session(database: Database) -> Iterator[Session]:
    """Resource provider: one session per container lifecycle, closed on shutdown"""
    session = database.session()
    try:
        yield session
    finally:
        session.close()
