"""
Database connection management.

The engine and session factory are built explicitly at startup by
``app_factory.create_app`` and handed to the repository; nothing here
connects at import time.

Environment variables:
    - DATABASE_URL: store connection URL (see config.py)
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from . import config
from .exceptions import StoreUnavailableError
from .models import Base

logger = logging.getLogger(__name__)


def create_store_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create a SQLAlchemy engine for the menu store.

    In-memory SQLite URLs get a StaticPool so every session shares the
    same database.
    """
    url = database_url or config.DATABASE_URL
    kwargs = {"pool_pre_ping": True, "echo": False}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool

    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Create the menu_items table and its indexes if missing."""
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        logger.error("Could not initialise menu store: %s", exc)
        raise StoreUnavailableError(f"Could not initialise menu store: {exc}") from exc
    logger.info("Menu store ready (%s)", engine.url.render_as_string(hide_password=True))
