# jobboard/db/database.py

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jobboard.config import DB_URL, DB_POOL_SIZE
from jobboard.db.models import Base

log = logging.getLogger(__name__)


def build_engine(url: str = DB_URL):
    """Creates the engine. Server databases get a bounded pool; excess requests wait for a connection."""
    if url.startswith("sqlite"):
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=False,  # Set echo=True for debugging SQL if needed
        pool_size=DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
    )


engine = build_engine()
Session = sessionmaker(bind=engine)


def prepare_database(bind=None):
    # Create tables if they don't exist. If they exist, this does nothing.
    Base.metadata.create_all(bind or engine)
    log.info("Database tables ensured.")
