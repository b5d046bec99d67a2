import os
from urllib.parse import quote_plus

import dotenv


def get_database_url():
    """Build the database URL from environment variables"""
    dotenv.load_dotenv()
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("MSSQL_HOST", "localhost")
    port = os.getenv("MSSQL_PORT", "1433")
    database = os.getenv("MSSQL_DB", "food_order_db")
    username = os.getenv("MSSQL_USER", "sa")
    password = os.getenv("MSSQL_PASSWORD", "password")
    driver = os.getenv("MSSQL_DRIVER", "ODBC Driver 18 for SQL Server")

    return (
        f"mssql+pyodbc://{username}:{quote_plus(password)}@{host}:{port}/{database}"
        f"?driver={quote_plus(driver)}&TrustServerCertificate=yes"
    )


def _get_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def get_seed_count() -> int:
    """Number of customers, food items, orders and payments to generate"""
    dotenv.load_dotenv()
    return _get_int("SEED_COUNT", 300)


def get_items_per_order() -> int:
    dotenv.load_dotenv()
    return _get_int("SEED_ITEMS_PER_ORDER", 3)


def get_random_seed():
    """RNG seed for reproducible runs, None when unset"""
    dotenv.load_dotenv()
    raw = os.getenv("SEED_RANDOM_SEED")
    if raw is None or raw.strip() == "":
        return None
    return _get_int("SEED_RANDOM_SEED", 0, minimum=0)


def get_sql_echo() -> bool:
    dotenv.load_dotenv()
    return os.getenv("SQL_ECHO", "false").strip().lower() in ("1", "true", "yes")
