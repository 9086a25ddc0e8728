"""
Engine, session and schema lifecycle for the recipe catalog.

Two ways to obtain a transactional scope:
- ``session_scope()`` works against the process-wide engine built from Config
- ``make_session_scope(factory)`` wraps any session factory (tests, embedding)

Repositories accept either as their storage collaborator. SQLite connections
get ``PRAGMA foreign_keys=ON`` so the RESTRICT/CASCADE clauses declared by
models.referential are enforced by the store itself.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Dict, Optional

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..models.base import Base
from ..utils.config import get_config

logger = logging.getLogger(__name__)

CATALOG_TABLES = ("categories", "recipes", "favorites")

# Zero-argument callable returning a transactional session context
SessionScope = Callable[[], ContextManager[Session]]

# Process-wide engine and session factory, created lazily
_engine: Optional[Engine] = None
_SessionFactory: Optional[sessionmaker] = None


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Turn on foreign key enforcement for every new SQLite connection."""
    if "sqlite" not in type(dbapi_connection).__module__:
        return

    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool and connect arguments suited to the kind of database URL."""
    if ":memory:" in database_url or "mode=memory" in database_url:
        # One shared connection, otherwise each checkout sees an empty database
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False, "timeout": 30}}
    return {"pool_pre_ping": True}


def create_database_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """
    Build an engine for the given URL.

    Args:
        database_url: SQLAlchemy URL; the configured URL when None
        echo: Log emitted SQL

    Returns:
        SQLAlchemy Engine
    """
    url = database_url or get_config().database_url
    logger.info(f"Creating engine for {url}")
    return create_engine(url, echo=echo, **_engine_options(url))


def get_engine(force_recreate: bool = False) -> Engine:
    """Return the process-wide engine, building it on first use."""
    global _engine

    if force_recreate or _engine is None:
        _engine = create_database_engine()
    return _engine


def get_session_factory() -> sessionmaker:
    """
    Return the process-wide session factory.

    Sessions keep loaded attributes after commit (expire_on_commit=False), so
    entities returned by services stay readable once their scope has closed.
    """
    global _SessionFactory

    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _SessionFactory


def get_session() -> Session:
    """Open a new session on the process-wide engine."""
    return get_session_factory()()


def make_session_scope(session_factory: Callable[[], Session]) -> SessionScope:
    """
    Wrap a session factory as a transactional scope.

    The returned callable yields a session, commits when the block finishes,
    rolls back and re-raises on any exception, and always closes the session.

    Args:
        session_factory: Callable returning a new Session (e.g. a sessionmaker)

    Returns:
        Zero-argument callable usable as ``with scope() as session:``

    Example:
        scope = make_session_scope(sessionmaker(bind=engine))
        services = build_services(scope)
    """

    @contextmanager
    def scope():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return scope


_global_scope = make_session_scope(get_session)


def session_scope() -> ContextManager[Session]:
    """
    Transactional scope on the process-wide engine.

    Example:
        with session_scope() as session:
            session.add(Category(title="Soups"))
    """
    return _global_scope()


def _register_models() -> None:
    # Importing the model modules registers their tables on Base.metadata
    from ..models import category, favorite, recipe  # noqa: F401


def init_database(engine: Optional[Engine] = None) -> None:
    """
    Create any missing catalog tables. Existing tables are left alone.

    Args:
        engine: Target engine; the process-wide engine when None
    """
    engine = engine or get_engine()
    _register_models()
    Base.metadata.create_all(engine)
    logger.info("Catalog tables created")


def verify_database() -> bool:
    """True when the process-wide database is reachable and has every catalog table."""
    try:
        present = set(inspect(get_engine()).get_table_names())
    except Exception as e:
        logger.error(f"Could not inspect database: {e}")
        return False

    missing = [table for table in CATALOG_TABLES if table not in present]
    if missing:
        logger.warning(f"Missing catalog tables: {missing}")
    return not missing


def reset_database(confirm: bool = False) -> None:
    """
    Drop and recreate every catalog table, discarding all data.

    Args:
        confirm: Must be True; guards against accidental calls

    Raises:
        ValueError: If confirm is not True
    """
    if not confirm:
        raise ValueError("reset_database() discards all data; pass confirm=True")

    engine = get_engine()
    _register_models()
    logger.warning("Dropping all catalog tables")
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    logger.info("Catalog tables recreated")


def close_connections() -> None:
    """Dispose of the process-wide engine; the next use builds a new one."""
    global _engine, _SessionFactory

    _SessionFactory = None
    if _engine is not None:
        _engine.dispose()
        _engine = None
    logger.info("Engine disposed")


def initialize_app_database() -> None:
    """Create the configured database and its tables if needed, then verify them."""
    config = get_config()

    if config.database_exists():
        logger.info(f"Opening database {config.database_url}")
    else:
        logger.info(f"Creating database at {config.database_path}")

    init_database(get_engine())

    if not verify_database():
        logger.warning("Database verification failed after initialization")
