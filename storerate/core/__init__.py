"""Core app configuration, database and security."""

from storerate.core.config import get_settings, settings
from storerate.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
