"""Database configuration for the Task Tracker API."""
from typing import Generator
from sqlmodel import create_engine, Session
from sqlalchemy import event

from app.config import DATABASE_URL
from app.utils.logger import get_logger

logger = get_logger(__name__)

IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    logger.info("Using SQLite database", url=DATABASE_URL)
else:
    logger.info("Using PostgreSQL database")

# SQLite connections are shared across the threadpool FastAPI runs sync handlers in
connect_args = {"check_same_thread": False} if IS_SQLITE else {}

engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args=connect_args,
    pool_pre_ping=not IS_SQLITE,
)


def enable_sqlite_foreign_keys(target_engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(target_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if IS_SQLITE:
    enable_sqlite_foreign_keys(engine)


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting a request-scoped database session."""
    with Session(engine) as session:
        yield session
