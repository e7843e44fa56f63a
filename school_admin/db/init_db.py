# school_admin/db/init_db.py
"""Database initialization utilities."""
from sqlalchemy.engine import Engine

from school_admin.core.logging import get_logger
from school_admin.db.session import engine as default_engine
from school_admin.models import Base

logger = get_logger(__name__)


def init_db(bind: Engine = default_engine) -> None:
    """
    Create every table that does not exist yet.

    Suitable for development and tests; production schemas are expected to
    be managed by migrations.
    """
    try:
        Base.metadata.create_all(bind=bind)
        logger.info(
            "Database tables ensured",
            extra={"table_count": len(Base.metadata.tables)},
        )
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(bind: Engine = default_engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    try:
        Base.metadata.drop_all(bind=bind)
        logger.warning("All database tables dropped")
    except Exception as e:
        logger.error(f"Error dropping database: {e}")
        raise
