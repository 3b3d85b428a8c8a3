"""Helpers and Flask application integration."""

import logging
import time
from contextlib import contextmanager
from typing import Generator, Optional, Type

from flask import Flask, g, has_app_context
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeout
from sqlalchemy.orm.session import Session

from .exceptions import Canceled, DeadlineExceeded, StorageError
from .models import db

logger = logging.getLogger(__name__)


@contextmanager
def transaction(on_conflict: Optional[Type[StorageError]] = None) \
        -> Generator[Session, None, None]:
    """
    Context manager for database transaction.

    Raw SQLAlchemy errors do not escape: an integrity violation becomes
    ``on_conflict`` (or :class:`.StorageError`), an interrupted statement
    becomes :class:`.Canceled`, and anything else :class:`.StorageError`.

    Raises
    ------
    :class:`.DeadlineExceeded`
        If the current request runs out of time before the commit.

    """
    check_deadline()
    try:
        yield db.session
        check_deadline()
        # Callers flush to surface constraint violations early, so there may
        # be nothing left in new/dirty; always commit.
        db.session.commit()
    except StorageError:
        db.session.rollback()
        raise
    except IntegrityError as e:
        db.session.rollback()
        logger.debug('Integrity violation, rolling back: %s', e.orig)
        raise (on_conflict or StorageError)('Constraint violated') from e
    except PoolTimeout as e:
        db.session.rollback()
        raise DeadlineExceeded('Timed out waiting for a connection') from e
    except OperationalError as e:
        db.session.rollback()
        if 'interrupted' in str(e.orig).lower():
            raise Canceled('Database operation interrupted') from e
        raise StorageError('Database error: %s' % e.orig) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError('Database error: %s' % e) from e
    except Exception:
        db.session.rollback()
        raise


def set_deadline(seconds: float) -> None:
    """Allow the current request ``seconds`` of storage work."""
    g.deadline = time.monotonic() + seconds


def check_deadline() -> None:
    """Raise :class:`.DeadlineExceeded` if the request deadline has passed."""
    if not has_app_context():
        return
    deadline: Optional[float] = g.get('deadline')
    if deadline is not None and time.monotonic() >= deadline:
        raise DeadlineExceeded('Request deadline exceeded')


def init_app(app: Flask) -> None:
    """Set configuration defaults and attach session to the application."""
    app.config.setdefault('SQLALCHEMY_TRACK_MODIFICATIONS', False)
    db.init_app(app)


def current_session() -> Session:
    """Get/create database session for this context."""
    return db.session


def create_all() -> None:
    """Create all tables in the database."""
    db.create_all()


def drop_all() -> None:
    """Drop all tables in the database."""
    db.drop_all()


def is_available() -> bool:
    """Check our connection to the database."""
    try:
        db.session.execute(text('SELECT 1'))
    except Exception as e:
        logger.error('Encountered an error talking to database: %s', e)
        return False
    return True
