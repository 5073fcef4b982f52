"""
Content assemblers: one query per aggregate, rows decoded in storage order.

Every assembler takes an open AsyncSession and a broadcast's public article
id and returns an AssemblyResult. Failures are returned, never raised:

- query could not run      -> empty value + QueryFailure
- a row failed to decode   -> rows decoded so far + DecodeFailure
- no matching broadcast    -> empty value, no error

Result cursors are closed on every exit path. Nothing here writes.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, TypeVar

from pydantic import ValidationError
from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from content.coalesce import coalesce_int, coalesce_str, resolve_override
from content.errors import AssemblyResult, ContentError, DecodeFailure, QueryFailure
from content.identity import resolve_comment_user
from content.queries import (
    broadcast_info_query,
    header_sortorder_query,
    infotexts_query,
    published_comments_query,
    sport_results_query,
)
from content.rows import (
    BroadcastInfoRow,
    CommentRow,
    HeaderSortorderRow,
    InfotextRow,
    RowModel,
    SportResultRow,
    row_mapping,
)
from shared.models.domain import (
    BroadcastInfo,
    Comment,
    HeaderSortorder,
    Infotext,
    SportResult,
    User,
)
from shared.models.enums import MessageType
from shared.utils.logging import get_logger
from shared.utils.metrics import (
    ASSEMBLED_ROWS,
    ASSEMBLY_FAILURES,
    ASSEMBLY_LATENCY,
    atrack_latency,
)

logger = get_logger(__name__)

R = TypeVar("R", bound=RowModel)
E = TypeVar("E")

PART_BROADCAST_INFO = "broadcast_info"
PART_INFOTEXTS = "infotexts"
PART_SPORT_RESULTS = "sport_results"
PART_HEADER_SORTORDER = "header_sortorder"
PART_COMMENTS = "comments"

_DECODE_ERRORS = (ValidationError, TypeError, ValueError)
# asyncpg connect and socket failures reach us unwrapped by SQLAlchemy.
_STORAGE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def _report(failure: ContentError) -> None:
    ASSEMBLY_FAILURES.labels(part=failure.part, kind=failure.kind).inc()
    logger.warning(
        "content_assembly_failed",
        part=failure.part,
        kind=failure.kind,
        article_id=failure.article_id,
        row_index=getattr(failure, "row_index", None),
        error=str(failure.cause) if failure.cause is not None else None,
    )


# ── Row -> entity ───────────────────────────────────────────────────────

def _broadcast_info_from_row(row: BroadcastInfoRow) -> BroadcastInfo:
    return BroadcastInfo(
        id=row.id,
        subject=coalesce_str(row.subject),
        description=coalesce_str(row.description),
        start_time=resolve_override(row.start_time),
        end_time=resolve_override(row.end_time),
        language_code=coalesce_str(row.language_code),
        enable_carousel=row.enable_carousel,
        auto_collapse=row.auto_collapse,
        default_order=coalesce_str(row.default_order),
        deleted_at=coalesce_str(row.deleted_at),
        show_description=row.show_description,
        has_sports_panel=row.has_sports_panel,
        autoscroll=row.autoscroll,
        has_comments=row.has_comments,
        allow_ifr_comments=row.allow_ifr_comments,
        allow_anon_comments=row.allow_anon_comments,
        anon_comment_require_email=row.anon_comment_require_email,
        anon_comment_accept_terms=row.anon_comment_accept_terms,
        user_terms_version=coalesce_str(row.user_terms_version),
        customer_id=row.customer_id,
        auto_archive=row.auto_archive,
        customer_shortname=coalesce_str(row.customer_shortname),
        archive_after_days=coalesce_int(row.archive_after_days),
        embed_js=coalesce_str(row.embed_js),
        embed_html=coalesce_str(row.embed_html),
        expanded_mode=row.expanded_mode,
        posts_to_show=coalesce_int(row.posts_to_show),
        syndicate=row.syndicate,
    )


def _infotext_from_row(row: InfotextRow) -> Infotext:
    return Infotext(
        text=coalesce_str(row.text),
        guid=row.guid,
        created_at=coalesce_str(row.created_at),
        updated_at=coalesce_str(row.updated_at),
        user=User(
            id=row.user_id,
            first_name=coalesce_str(row.first_name),
            last_name=coalesce_str(row.last_name),
            profile_pic=coalesce_str(row.profile_pic),
            slug=coalesce_str(row.slug),
        ),
        message_type=MessageType.INFO,
    )


def _sport_result_from_row(row: SportResultRow) -> SportResult:
    return SportResult(
        team_one_name=coalesce_str(row.team_one_name),
        team_two_name=coalesce_str(row.team_two_name),
        team_one_logo=coalesce_str(row.team_one_logo),
        team_two_logo=coalesce_str(row.team_two_logo),
        team_one_result=coalesce_int(row.team_one_result),
        team_two_result=coalesce_int(row.team_two_result),
        article_id=row.article_id,
        guid=row.guid,
        created_at=coalesce_str(row.created_at),
        message_type=MessageType.SPORT_RESULT,
    )


def _header_sortorder_from_row(row: HeaderSortorderRow) -> HeaderSortorder:
    return HeaderSortorder(
        guid=row.guid,
        index=row.sortorder,
        message_type=MessageType.HEADER_SORTORDER,
    )


def _comment_from_row(row: CommentRow) -> Comment:
    return Comment(
        id=row.id,
        article_id=row.article_id,
        broadcast_id=row.broadcast_id,
        comment_guid=row.comment_guid,
        report_guid=coalesce_str(row.report_guid),
        parent_comment_guid=coalesce_str(row.parent_comment_guid),
        status=row.status,
        is_pinned=row.is_pinned,
        text=row.text,
        user=resolve_comment_user(row.author()),
        written_at=coalesce_str(row.written_at),
        created_at=coalesce_str(row.created_at),
        updated_at=coalesce_str(row.updated_at),
        published_by_user_id=coalesce_int(row.published_by_user_id),
        message_type=MessageType.THREAD_COMMENT,
    )


# ── Shared list loop ────────────────────────────────────────────────────

async def _collect(
    session: AsyncSession,
    article_id: str,
    part: str,
    statement: Select,
    row_model: type[R],
    build: Callable[[R], E],
) -> AssemblyResult[list[E]]:
    """Stream rows, decode each in arrival order, stop at the first bad row."""
    items: list[E] = []

    async with atrack_latency(ASSEMBLY_LATENCY, part=part):
        try:
            result = await session.stream(statement)
        except _STORAGE_ERRORS as exc:
            failure = QueryFailure(part, article_id, exc)
            _report(failure)
            return AssemblyResult([], failure)

        try:
            index = 0
            async for row in result:
                try:
                    items.append(build(row_model.model_validate(row_mapping(row))))
                except _DECODE_ERRORS as exc:
                    failure = DecodeFailure(part, article_id, index, exc)
                    _report(failure)
                    return AssemblyResult(items, failure)
                index += 1
        except _STORAGE_ERRORS as exc:
            failure = QueryFailure(part, article_id, exc)
            _report(failure)
            return AssemblyResult([], failure)
        finally:
            await result.close()

    ASSEMBLED_ROWS.labels(part=part).inc(len(items))
    return AssemblyResult(items)


# ── Entry points ────────────────────────────────────────────────────────

async def get_broadcast_info(session: AsyncSession, article_id: str) -> AssemblyResult[BroadcastInfo]:
    """Fetch metadata about a broadcast. A missing broadcast yields the zero-value record."""
    part = PART_BROADCAST_INFO

    async with atrack_latency(ASSEMBLY_LATENCY, part=part):
        try:
            result = await session.execute(broadcast_info_query(article_id))
            row: Any = result.first()
        except _STORAGE_ERRORS as exc:
            failure = QueryFailure(part, article_id, exc)
            _report(failure)
            return AssemblyResult(BroadcastInfo(), failure)

    if row is None:
        logger.debug("broadcast_info_not_found", article_id=article_id)
        return AssemblyResult(BroadcastInfo())

    try:
        info = _broadcast_info_from_row(BroadcastInfoRow.model_validate(row_mapping(row)))
    except _DECODE_ERRORS as exc:
        failure = DecodeFailure(part, article_id, 0, exc)
        _report(failure)
        return AssemblyResult(BroadcastInfo(), failure)

    ASSEMBLED_ROWS.labels(part=part).inc()
    return AssemblyResult(info)


async def get_infotexts(session: AsyncSession, article_id: str) -> AssemblyResult[list[Infotext]]:
    """Free-format info texts shown in the header carousel, oldest first."""
    return await _collect(
        session, article_id, PART_INFOTEXTS,
        infotexts_query(article_id), InfotextRow, _infotext_from_row,
    )


async def get_sport_results(session: AsyncSession, article_id: str) -> AssemblyResult[list[SportResult]]:
    """Scoreboard history, oldest first. The last element is the current score."""
    return await _collect(
        session, article_id, PART_SPORT_RESULTS,
        sport_results_query(article_id), SportResultRow, _sport_result_from_row,
    )


async def get_header_sortorder(session: AsyncSession, article_id: str) -> AssemblyResult[list[HeaderSortorder]]:
    return await _collect(
        session, article_id, PART_HEADER_SORTORDER,
        header_sortorder_query(article_id), HeaderSortorderRow, _header_sortorder_from_row,
    )


async def get_published_thread_comments(
    session: AsyncSession, article_id: str
) -> AssemblyResult[list[Comment]]:
    """All published, non-deleted comments as a flat list tagged with parent GUIDs."""
    return await _collect(
        session, article_id, PART_COMMENTS,
        published_comments_query(article_id), CommentRow, _comment_from_row,
    )
