"""Database module for rechart."""

from rechart.db.base import Base, SessionLocal, engine, get_db, init_db
from rechart.db.models import (
    Chart,
    Diagram,
    SharedResource,
)

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "engine",
    "SessionLocal",
    "Chart",
    "Diagram",
    "SharedResource",
]
