"""
Database connection management for the SQL cache backend.

Only used when CACHE_BACKEND=sql. The URL comes from CACHE_DB_URL and defaults
to a local SQLite file.

Environment variables:
    - CACHE_DB_URL: SQLAlchemy connection URL
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .models import Base


def create_cache_engine(url: str) -> Engine:
    """Create an engine for the cache database and make sure the table exists."""
    connect_args = {}
    if url.startswith("sqlite"):
        # Cache queries run in worker threads
        connect_args["check_same_thread"] = False

    engine = create_engine(
        url,
        pool_pre_ping=True,
        echo=False,
        connect_args=connect_args,
    )
    Base.metadata.create_all(bind=engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
