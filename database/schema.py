"""Schema definition: idempotent creation of the food order tables"""
import logging

from database.connection import Base
from database.models import MODELS

logger = logging.getLogger(__name__)

# Dependency order, parents first
TABLES = [model.__table__ for model in MODELS]


def drop_schema(engine):
    """Drop the tables that exist, children before parents"""
    with engine.begin() as connection:
        for table in reversed(TABLES):
            table.drop(connection, checkfirst=True)
            logger.debug(f"Dropped table {table.name} (if present)")


def create_schema(engine):
    """
    Drop and recreate all tables and indexes.
    Safe to re-run: the resulting structure is the same every time.
    """
    drop_schema(engine)
    Base.metadata.create_all(engine, tables=TABLES)
    logger.info(f"Created tables: {', '.join(table.name for table in TABLES)}")
