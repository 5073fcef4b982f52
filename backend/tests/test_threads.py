"""Unit tests for the consumer-side thread and report helpers."""
from __future__ import annotations

from content.threads import (
    ROOT,
    attach_report_comments,
    build_thread_index,
    current_result,
    group_by_report,
    replies_to,
)
from shared.models.domain import Comment, Report, SportResult


def _comment(guid: str, parent: str = "", report: str = "") -> Comment:
    return Comment(comment_guid=guid, parent_comment_guid=parent, report_guid=report)


def test_thread_index_groups_replies_in_input_order() -> None:
    comments = [
        _comment("a"),
        _comment("b", parent="a"),
        _comment("c"),
        _comment("d", parent="a"),
        _comment("e", parent="b"),
    ]
    index = build_thread_index(comments)

    assert [c.comment_guid for c in index[ROOT]] == ["a", "c"]
    assert [c.comment_guid for c in replies_to(index, comments[0])] == ["b", "d"]
    assert [c.comment_guid for c in replies_to(index, comments[1])] == ["e"]
    assert replies_to(index, comments[2]) == []


def test_thread_index_keeps_orphans_under_their_parent_guid() -> None:
    index = build_thread_index([_comment("x", parent="deleted-parent")])
    assert ROOT not in index
    assert [c.comment_guid for c in index["deleted-parent"]] == ["x"]


def test_group_by_report_skips_unreported() -> None:
    groups = group_by_report([
        _comment("a", report="r1"),
        _comment("b"),
        _comment("c", report="r1"),
        _comment("d", report="r2"),
    ])
    assert set(groups) == {"r1", "r2"}
    assert [c.comment_guid for c in groups["r1"]] == ["a", "c"]


def test_attach_report_comments_returns_copy() -> None:
    report = Report(guid="r1", text="Summary")
    comments = [_comment("a", report="r1"), _comment("b", report="r2")]

    attached = attach_report_comments(report, comments)

    assert [c.comment_guid for c in attached.comments] == ["a"]
    assert report.comments == []


def test_current_result() -> None:
    assert current_result([]) is None
    history = [SportResult(guid="s1", team_one_result=1), SportResult(guid="s2", team_one_result=2)]
    assert current_result(history).team_one_result == 2
