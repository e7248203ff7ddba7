"""Database package."""
from meetgrid.db.session import engine, SessionLocal, get_db
from meetgrid.db.base import Base

__all__ = ["engine", "SessionLocal", "get_db", "Base"]
