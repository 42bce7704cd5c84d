import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from alembic import command
from alembic.config import Config
from doga_server.models import GalleryItem, Room, RoomGallery, RoomType, Service, ServiceGallery, SliderItem

logger = logging.getLogger(__name__)

ASYNC_TO_SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite+pysqlite",
    "postgresql+asyncpg": "postgresql+psycopg",
    "postgresql+psycopg_async": "postgresql+psycopg",
}


def is_sqlite(database_url: str) -> bool:
    return make_url(database_url).get_backend_name() == "sqlite"


def sync_database_url(database_url: str) -> str:
    url = make_url(database_url)
    sync_driver = ASYNC_TO_SYNC_DRIVERS.get(url.drivername)
    if sync_driver is None:
        return database_url
    return url.set(drivername=sync_driver).render_as_string(hide_password=False)


def ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database.startswith(("file:", ":memory:")):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_session_maker(database_url: str) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    if is_sqlite(database_url):
        engine = create_async_engine(
            database_url,
            echo=False,
            connect_args={
                "check_same_thread": False,
                "timeout": 20,
            },
        )

        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn: Any, _connection_record: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.close()

    else:
        engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=10,
            max_overflow=20,
            pool_timeout=30,
            pool_recycle=3600,
        )

    return engine, async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def get_session(
    session_maker: async_sessionmaker[AsyncSession],
    read_only: bool = False,
) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        try:
            yield session
            if not read_only:
                await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def run_migrations(database_url: str, config_path: str = "alembic.ini") -> None:
    alembic_cfg = Config(config_path)
    alembic_cfg.set_main_option("sqlalchemy.url", sync_database_url(database_url).replace("%", "%%"))
    command.upgrade(alembic_cfg, "head")
    logger.info("Database schema is up to date")


__all__ = [
    "create_session_maker",
    "ensure_sqlite_directory",
    "get_session",
    "run_migrations",
    "sync_database_url",
    "GalleryItem",
    "Room",
    "RoomGallery",
    "RoomType",
    "Service",
    "ServiceGallery",
    "SliderItem",
]
