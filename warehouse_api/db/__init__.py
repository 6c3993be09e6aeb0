"""Database package — async SQLAlchemy engine lifecycle, session dependency, Base."""
from warehouse_api.db.base import Base, Database, get_db

__all__ = ["Base", "Database", "get_db"]
