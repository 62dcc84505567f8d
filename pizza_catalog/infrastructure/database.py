"""Database Session Manager — scoped sessions with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every session is closed when its block exits
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to PersistenceError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized once per process via init_db
    - expire_on_commit=False: returned pizzas stay readable after the session closes
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.orm import Session, sessionmaker

from pizza_catalog.core.errors import PersistenceError
from pizza_catalog.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages database sessions with pooling, rollback, and health checks."""

    def __init__(self, database_url: str, echo: bool = False, **engine_kwargs):
        self.engine = create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        self._session_factory = sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"error_code": "PERSISTENCE_ERROR"})
            raise PersistenceError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            session.rollback()
            logger.error(f"DB operational error: {e}", extra={"error_code": "PERSISTENCE_ERROR"})
            raise PersistenceError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            session.rollback()
            logger.error(f"DB driver error: {e}", extra={"error_code": "PERSISTENCE_ERROR"})
            raise PersistenceError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"error_code": "PERSISTENCE_ERROR"})
            raise PersistenceError("Database operation failed", "unknown") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        """Create every table registered on Base.metadata."""
        import pizza_catalog.models  # noqa: F401
        Base.metadata.create_all(self.engine)

    def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except PersistenceError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db() -> Generator[Session, None, None]:
    """Yield a session from the process-wide manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    with db_manager.session() as session:
        yield session
