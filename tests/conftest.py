import os
import random
from datetime import datetime

import pytest

# Must be set before database.connection builds the module-level engine
os.environ["DATABASE_URL"] = "sqlite://"

from sqlalchemy.orm import sessionmaker  # noqa: E402

from database.connection import build_engine  # noqa: E402
from database.schema import create_schema  # noqa: E402
from database.seed import seed_database  # noqa: E402

SEED_NOW = datetime(2025, 1, 15, 12, 0, 0)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    db = sessionmaker(autoflush=False, bind=engine)()
    yield db
    db.close()


@pytest.fixture
def seeded(engine, session):
    summary = seed_database(session, count=300, items_per_order=3, rng=random.Random(42), now=SEED_NOW)
    return summary
