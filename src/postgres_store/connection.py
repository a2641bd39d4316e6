"""Engine and session handling for the articles database."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from common.errors import StoreError


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for a PostgreSQL URL (psycopg2 driver)."""
    return create_engine(database_url, pool_pre_ping=True)


def to_store_error(exc: SQLAlchemyError) -> StoreError:
    """Wrap a SQLAlchemy error, keeping the driver's detail line if any."""
    details = None
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        diag = getattr(exc.orig, "diag", None)
        details = getattr(diag, "message_detail", None)
        return StoreError(str(exc.orig).strip(), details=details)
    return StoreError(str(exc), details=details)


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    """Context manager for a session with automatic commit/rollback."""
    session = sessionmaker(bind=engine)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
