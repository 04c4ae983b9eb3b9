import logging

from sqlalchemy.engine import Engine

from db import Base, get_engine
import models  # noqa: F401  registers the tables with Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine = None) -> list:
    """Create any missing tables; returns the table names known to the metadata."""
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    names = sorted(Base.metadata.tables)
    logger.info("Tables ready: %s", ", ".join(names))
    return names


if __name__ == "__main__":
    from config import configure_logging

    configure_logging()
    init_db()
