from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from database.config import get_database_url, get_sql_echo

Base = declarative_base()


def build_engine(url, echo=False):
    """Create an engine; SQLite connections get foreign key enforcement"""
    engine = create_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


DATABASE_URL = get_database_url()

engine = build_engine(DATABASE_URL, echo=get_sql_echo())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
