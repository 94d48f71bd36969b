from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
import logging

logger = logging.getLogger(__name__)

# In-memory only: every engine is a fresh, private database
DATABASE_URL = "sqlite://"

Base = declarative_base()


def create_memory_engine() -> Engine:
    """Create an engine whose single shared connection holds the whole database."""
    return create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def init_db(engine: Engine) -> sessionmaker:
    """Create tables on the engine and return a session factory bound to it."""
    from string_analyzer import models  # noqa: F401  ensure models are imported

    Base.metadata.create_all(bind=engine)
    logger.info(f"String table created on {engine.url}")
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)
