"""In-memory data store for a chat backend."""

from .core.logging_config import setup_logging
from .database import Database, get_database

__all__ = ["Database", "get_database", "setup_logging"]

__version__ = "0.1.0"
