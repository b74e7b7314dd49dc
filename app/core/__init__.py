"""Core: settings, database sessions, credentials and API error types."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, get_db
from app.core.errors import ApiError

__all__ = ["ApiError", "SessionLocal", "get_db", "get_settings", "settings"]
