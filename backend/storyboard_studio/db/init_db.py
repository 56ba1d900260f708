import logging

from sqlalchemy import inspect

from storyboard_studio.db.base import Base
from storyboard_studio.db.session import engine
from storyboard_studio import models  # noqa: F401  registers every table on Base

logger = logging.getLogger(__name__)


def init_db(bind=None) -> list[str]:
    """Create missing tables and return the table names now present."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    tables = inspect(bind).get_table_names()
    logger.info("Database ready with %d tables: %s", len(tables), ", ".join(tables))
    return tables
