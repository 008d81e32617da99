"""Database package: declarative base, engine and request sessions."""

from trainings.db.base import Base
from trainings.db.session import async_session_maker, engine, get_db

__all__ = ["Base", "async_session_maker", "engine", "get_db"]
