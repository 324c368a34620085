"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine

from goraeph.db.session import engine as default_engine
from goraeph.models.base import Base
from goraeph.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready on %s", engine.url.render_as_string(hide_password=True))
