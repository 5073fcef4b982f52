"""
Broadcast content service.

Runs the five assemblers for one broadcast concurrently and joins the results.
Each assembler gets its own read session, since an AsyncSession must not be
shared between concurrent tasks. No caching, no retries: a failed part is
reported alongside whatever the other parts produced.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from content.assemblers import (
    get_broadcast_info,
    get_header_sortorder,
    get_infotexts,
    get_published_thread_comments,
    get_sport_results,
)
from content.errors import AssemblyResult, ContentError
from shared.models.domain import BroadcastContent
from shared.utils.database import DatabaseManager
from shared.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ContentLoad:
    content: BroadcastContent
    errors: list[ContentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class BroadcastContentService:
    """Loads the joined live-blog feed for a broadcast."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def _run(
        self,
        assembler: Callable[[AsyncSession, str], Awaitable[AssemblyResult[T]]],
        article_id: str,
    ) -> AssemblyResult[T]:
        async with self._db.read_session() as session:
            return await assembler(session, article_id)

    async def load(self, article_id: str) -> ContentLoad:
        info, infotexts, sport_results, sortorder, comments = await asyncio.gather(
            self._run(get_broadcast_info, article_id),
            self._run(get_infotexts, article_id),
            self._run(get_sport_results, article_id),
            self._run(get_header_sortorder, article_id),
            self._run(get_published_thread_comments, article_id),
        )

        errors = [
            r.error
            for r in (info, infotexts, sport_results, sortorder, comments)
            if r.error is not None
        ]
        content = BroadcastContent(
            article_id=article_id,
            info=info.value,
            infotexts=infotexts.value,
            sport_results=sport_results.value,
            header_sortorder=sortorder.value,
            comments=comments.value,
        )

        logger.info(
            "broadcast_content_loaded",
            article_id=article_id,
            infotexts=len(infotexts.value),
            sport_results=len(sport_results.value),
            comments=len(comments.value),
            failed_parts=[e.part for e in errors],
        )
        return ContentLoad(content=content, errors=errors)
