"""
Null coalescing for relational columns.

Every row decoder funnels optional columns through these helpers so that the
domain model never sees None: absent text becomes "", absent integers 0.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def coalesce_str(value: Optional[str]) -> str:
    return "" if value is None else value


def coalesce_int(value: Optional[int]) -> int:
    return 0 if value is None else value


def resolve_override(override: Optional[str], default: str = "") -> str:
    """Prefer a present override column, else the default."""
    return default if override is None else override


def timestamp_text(value: Any) -> Any:
    """Render driver datetimes as ISO-8601 text; anything else passes through."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value
