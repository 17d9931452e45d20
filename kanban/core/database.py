# kanban/core/database.py
import logging
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import DateTime, create_engine, text
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from kanban.core.config import Settings
from kanban.core.errors import StartupError

logger = logging.getLogger(__name__)


# MySQL DATETIME drops fractional seconds unless a precision is given
UTCDateTime = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in the timestamp columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, settings: Settings):
        url = settings.database_url
        engine_args = {
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": 0,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }
        if str(url).startswith("sqlite"):
            engine_args["connect_args"] = {"check_same_thread": False}
            if str(url) in ("sqlite://", "sqlite:///:memory:"):
                # one shared connection, otherwise every thread sees an empty database
                engine_args = {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
        else:
            engine_args["pool_pre_ping"] = True
        self.engine = create_engine(url, **engine_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def check_connection(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Database connection failed: %s", exc)
            raise StartupError("Database connection failed") from exc
        logger.info("Database connection successful")

    def create_schema(self) -> None:
        # create_all checks for existing tables, so reruns are no-ops
        try:
            Base.metadata.create_all(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.error("Failed to initialize database schema: %s", exc)
            raise StartupError("Failed to initialize database schema") from exc
        logger.info("Database schema initialized")

    def dispose(self) -> None:
        self.engine.dispose()

    def session(self) -> Session:
        return self.SessionLocal()


# Common DB dependency
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
