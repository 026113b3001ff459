"""Engine, session factory and declarative base for saved records."""

import logging
import os
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./rechart.db"


def normalize_database_url(url: str) -> str:
    """Rewrite legacy ``postgres://`` URLs to the dialect name SQLAlchemy expects."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine with per-backend connection settings."""
    url = normalize_database_url(url)

    if url.startswith("sqlite"):
        # Sessions are handed across the threadpool used by sync routes
        return create_engine(url, connect_args={"check_same_thread": False}, echo=echo)

    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        echo=echo,
    )


DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL))

engine = make_engine(DATABASE_URL, echo=os.getenv("SQL_ECHO", "false").lower() == "true")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield a session that is closed when the request finishes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the chart, diagram and share tables if they are missing."""
    # Registers the models on Base.metadata
    from rechart.db import models  # noqa: F401

    target = bind or engine
    logger.info(f"Creating tables on {target.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=target)
