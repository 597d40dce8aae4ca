# jobboard/config.py

from dotenv import load_dotenv
import os
import logging

log = logging.getLogger(__name__)


# --- Environment Variable Loading ---
load_dotenv()

DEFAULT_DB_URL = "sqlite:///./jobboard.db"


def _int_env(name: str, default: int) -> int:
    """Reads an integer environment variable, falling back to the default on bad input."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning(f"Invalid {name} in environment ({raw!r}), using default {default}.")
        return default


def normalize_database_url(raw_url: str, password: str | None = None) -> str:
    """
    Turns a hosting-provider style DATABASE_URL into a SQLAlchemy URL.

    Strips a leading 'jdbc:', fills in a '<PASSWORD>' placeholder and points a bare
    'mysql://' scheme at the PyMySQL driver.
    """
    url = raw_url.strip()
    if url.startswith("jdbc:"):
        url = url[len("jdbc:"):]
    if "<PASSWORD>" in url:
        url = url.replace("<PASSWORD>", password or "")
    if url.startswith("mysql://"):
        url = "mysql+pymysql://" + url[len("mysql://"):]
    return url


def resolve_database_url() -> str:
    explicit = os.getenv("DB_URL")
    if explicit:
        return explicit
    hosted = os.getenv("DATABASE_URL")
    if hosted:
        return normalize_database_url(hosted, os.getenv("DB_PASSWORD"))
    return DEFAULT_DB_URL


APP_ENV = os.getenv("APP_ENV", "production").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DB_URL = resolve_database_url()
DB_POOL_SIZE = _int_env("DB_POOL_SIZE", 10)

GRAPHQL_MAX_DEPTH = _int_env("GRAPHQL_MAX_DEPTH", 6)
GRAPHQL_INTROSPECTION_MAX_DEPTH = _int_env("GRAPHQL_INTROSPECTION_MAX_DEPTH", 15)

# Prefix used in the human readable salary range of a post
SALARY_CURRENCY = os.getenv("SALARY_CURRENCY", "THB")
