from collections.abc import Generator

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from moviedb.core.config import Settings


class Database:
    """
    Owns the engine (and with it the connection pool) for the lifetime of
    the application. Each request gets its own session which checks out a
    pooled connection and hands it back when closed.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        uri = settings.SQLALCHEMY_DATABASE_URI
        connect_args = {}
        if uri.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        engine = create_engine(
            uri,
            echo=settings.DEBUG,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        return cls(engine)

    def create_tables(self) -> None:
        # Registers the movies/comments tables on the metadata
        from moviedb import models  # noqa: F401

        logger.info("Creating missing tables")
        SQLModel.metadata.create_all(self.engine)

    def session(self) -> Generator[Session, None, None]:
        session = Session(self.engine)
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
