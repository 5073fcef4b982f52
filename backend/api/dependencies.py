"""
Dependency injection for the content API.
Provides the database manager and content service to route handlers.
"""
from __future__ import annotations

from content.service import BroadcastContentService
from shared.utils.database import DatabaseManager

# Module-level singletons, initialized at startup
_db: DatabaseManager | None = None
_content: BroadcastContentService | None = None


def init_dependencies(db: DatabaseManager) -> None:
    """Initialize module-level singletons. Called once at startup."""
    global _db, _content
    _db = db
    _content = BroadcastContentService(db)


def get_db() -> DatabaseManager:
    """FastAPI dependency: returns the shared DatabaseManager."""
    if _db is None:
        raise RuntimeError("DatabaseManager not initialized, call init_dependencies first")
    return _db


def get_content_service() -> BroadcastContentService:
    """FastAPI dependency: returns the shared BroadcastContentService."""
    if _content is None:
        raise RuntimeError("BroadcastContentService not initialized, call init_dependencies first")
    return _content
