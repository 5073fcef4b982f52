"""
Helpers for consumers of the flat content lists.

The assemblers return comments as a flat list tagged with parent and report
GUIDs; these build the indexes a client needs to render threads, without
re-ordering anything.
"""
from __future__ import annotations

from typing import Iterable, Optional

from shared.models.domain import Comment, Report, SportResult

ROOT = ""


def build_thread_index(comments: Iterable[Comment]) -> dict[str, list[Comment]]:
    """Map parent GUID -> replies. Top-level comments are under ROOT."""
    index: dict[str, list[Comment]] = {}
    for comment in comments:
        index.setdefault(comment.parent_comment_guid, []).append(comment)
    return index


def replies_to(index: dict[str, list[Comment]], comment: Comment) -> list[Comment]:
    return index.get(comment.comment_guid, [])


def group_by_report(comments: Iterable[Comment]) -> dict[str, list[Comment]]:
    """Map report GUID -> comments it groups. Comments outside any report are skipped."""
    groups: dict[str, list[Comment]] = {}
    for comment in comments:
        if comment.report_guid:
            groups.setdefault(comment.report_guid, []).append(comment)
    return groups


def attach_report_comments(report: Report, comments: Iterable[Comment]) -> Report:
    """Copy of ``report`` carrying the comments that reference it."""
    mine = [c for c in comments if c.report_guid == report.guid]
    return report.model_copy(update={"comments": mine})


def current_result(results: list[SportResult]) -> Optional[SportResult]:
    """The latest scoreboard snapshot; history is oldest first."""
    return results[-1] if results else None
