"""
Database engine, session management, and base model.

Every model inherits from Base. Every request gets a session
from get_db(). Every multi-row write runs inside atomic().
"""

import sqlite3
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from bookkeeping.config import get_settings
from bookkeeping.exceptions import StorageError

settings = get_settings()

# --- Engine ---
# Stale connections are detected and replaced on checkout.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# Nothing reaches the database until a flush, and nothing
# is kept until a commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


# SQLite ignores foreign keys unless asked per connection.
# Entries must reference an existing account and journal.
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The session is closed when the request finishes, whether
    or not the route raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session):
    """
    Run a block of writes as one transaction.

    Commits when the block finishes. Any exception rolls the
    whole transaction back; database failures are re-raised as
    StorageError, everything else propagates unchanged.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(str(e)) from e
    except Exception:
        db.rollback()
        raise


@contextmanager
def storage_errors():
    """
    Re-raise failures of a read as StorageError.

    An account type the enum does not know surfaces as a
    LookupError while rows are processed, so it is caught along
    with database errors. Raise NotFoundError outside the block.
    """
    try:
        yield
    except (SQLAlchemyError, LookupError) as e:
        raise StorageError(str(e)) from e
