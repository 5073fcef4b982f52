"""Domain enumerations for the Live Blog content feed."""
from __future__ import annotations

from enum import Enum


class MessageType(str, Enum):
    """Discriminant stamped on every entity in a merged content stream."""
    INFO = "info"
    THREAD_COMMENT = "threadComment"
    SPORT_RESULT = "sportResult"
    HEADER_SORTORDER = "headerSortorder"
    REPORT = "report"


class CommentStatus(str, Enum):
    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"


class IdentitySource(str, Enum):
    """Which identity record supplies a comment author's displayed identity."""
    USER = "user"
    ALIAS = "alias"
    GUEST = "guest"
    NONE = "none"

    @property
    def is_platform_user(self) -> bool:
        return self in (IdentitySource.USER, IdentitySource.ALIAS)
