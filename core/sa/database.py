# core/sa/database.py
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, QueuePool
import os

from core.exceptions import StorageUnavailable
from core.sa.models import Base

DEFAULT_DB_PATH = "books.db"


class Database:
    def __init__(self, connection_string: Optional[str] = None, db_path: Optional[str] = None, **engine_kwargs):
        """Initialize database connection

        Args:
            connection_string: Database connection string (e.g., "sqlite:///books.db")
            db_path: Path to a SQLite file, used when no connection string is given.
                     If neither is set, the DATABASE_URL environment variable is used,
                     falling back to SQLite at books.db
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        if connection_string is None and db_path is not None:
            connection_string = f"sqlite:///{db_path}"
        self.connection_string = connection_string or os.getenv("DATABASE_URL", f"sqlite:///{DEFAULT_DB_PATH}")
        self.is_sqlite = self.connection_string.startswith("sqlite")

        # SQLite-specific settings
        if self.is_sqlite:
            engine_kwargs.setdefault("poolclass", NullPool)  # SQLite typically doesn't need connection pooling
        else:
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("poolclass", QueuePool)

        try:
            self.engine = create_engine(
                self.connection_string,
                **engine_kwargs
            )
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"invalid database URL {self.connection_string!r}: {e}") from e

        self._SessionFactory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @property
    def name(self) -> str:
        """Database name as shown to users (file path for SQLite)"""
        return self.engine.url.database or self.connection_string

    def init_db(self) -> None:
        """Create the schema; existing tables are left untouched"""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        return self._SessionFactory()

    def dispose(self) -> None:
        self.engine.dispose()
