import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from database.connection import engine
from database.sanity import count_rows, format_report
from database.schema import create_schema
from database.seed import create_sample_data

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Create the schema, seed it and print the row counts"""
    try:
        create_schema(engine)
        create_sample_data()
        with engine.connect() as connection:
            counts = count_rows(connection)
    except SQLAlchemyError:
        logger.exception("Run aborted")
        raise

    print(format_report(counts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
