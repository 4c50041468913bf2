"""
Database Client

Sync SQLAlchemy engine built from settings. Embedding applications normally
bring their own engine; this one backs schema checks and local tooling.
"""

import structlog
from sqlalchemy import Engine, create_engine

from resource_id.config import get_settings

logger = structlog.get_logger()

_engine: Engine | None = None


def init_db(database_url: str | None = None) -> Engine:
    """Create the engine if it does not exist yet and return it."""
    global _engine

    if _engine is not None:
        return _engine

    settings = get_settings()
    url = database_url or settings.database_url
    _engine = create_engine(url, echo=settings.log_level == "DEBUG")
    logger.info("Database engine initialized", dialect=_engine.dialect.name)
    return _engine


def get_engine() -> Engine:
    """Return the engine, initializing it from settings on first use."""
    if _engine is None:
        return init_db()
    return _engine


def close_db() -> None:
    """Dispose of the engine."""
    global _engine

    if _engine:
        _engine.dispose()
        _engine = None
        logger.info("Database engine closed")
