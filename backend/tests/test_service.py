"""Tests for the concurrent broadcast content loader."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import pytest

import content.service as service_module
from content.errors import AssemblyResult, DecodeFailure, QueryFailure
from content.service import BroadcastContentService
from shared.models.domain import BroadcastInfo, Comment, HeaderSortorder, Infotext, SportResult


class FakeDatabase:
    """Hands out a distinct sentinel session per read_session() call."""

    def __init__(self) -> None:
        self.sessions: list[object] = []
        self.open = 0

    @asynccontextmanager
    async def read_session(self) -> AsyncIterator[object]:
        session = object()
        self.sessions.append(session)
        self.open += 1
        try:
            yield session
        finally:
            self.open -= 1


def _stub(value: Any, error: Any = None, seen: list | None = None):
    async def _assembler(session: object, article_id: str) -> AssemblyResult:
        if seen is not None:
            seen.append((session, article_id))
        return AssemblyResult(value, error)
    return _assembler


@pytest.fixture
def stub_assemblers(monkeypatch: pytest.MonkeyPatch) -> list:
    seen: list = []
    monkeypatch.setattr(service_module, "get_broadcast_info",
                        _stub(BroadcastInfo(id=10, subject="Derby"), seen=seen))
    monkeypatch.setattr(service_module, "get_infotexts",
                        _stub([Infotext(guid="i1")], seen=seen))
    monkeypatch.setattr(service_module, "get_sport_results",
                        _stub([SportResult(guid="s1")], seen=seen))
    monkeypatch.setattr(service_module, "get_header_sortorder",
                        _stub([HeaderSortorder(guid="i1", index=1)], seen=seen))
    monkeypatch.setattr(service_module, "get_published_thread_comments",
                        _stub([Comment(comment_guid="c1")], seen=seen))
    return seen


@pytest.mark.asyncio
async def test_load_joins_all_parts(stub_assemblers: list) -> None:
    db = FakeDatabase()
    load = await BroadcastContentService(db).load("ART-100")

    assert load.ok
    assert load.content.article_id == "ART-100"
    assert load.content.info.subject == "Derby"
    assert [t.guid for t in load.content.infotexts] == ["i1"]
    assert [r.guid for r in load.content.sport_results] == ["s1"]
    assert [o.guid for o in load.content.header_sortorder] == ["i1"]
    assert [c.comment_guid for c in load.content.comments] == ["c1"]


@pytest.mark.asyncio
async def test_each_part_gets_its_own_session(stub_assemblers: list) -> None:
    db = FakeDatabase()
    await BroadcastContentService(db).load("ART-100")

    assert len(db.sessions) == 5
    assert len({id(s) for s in db.sessions}) == 5
    assert {article for _, article in stub_assemblers} == {"ART-100"}
    assert db.open == 0


@pytest.mark.asyncio
async def test_failed_parts_are_reported_with_partial_data(
    stub_assemblers: list, monkeypatch: pytest.MonkeyPatch
) -> None:
    decode = DecodeFailure("comments", "ART-100", 1)
    query = QueryFailure("sport_results", "ART-100")
    monkeypatch.setattr(service_module, "get_published_thread_comments",
                        _stub([Comment(comment_guid="c1")], decode))
    monkeypatch.setattr(service_module, "get_sport_results", _stub([], query))

    load = await BroadcastContentService(FakeDatabase()).load("ART-100")

    assert not load.ok
    assert {e.part for e in load.errors} == {"comments", "sport_results"}
    assert [c.comment_guid for c in load.content.comments] == ["c1"]
    assert load.content.sport_results == []
    assert load.content.info.id == 10


class UnreachableDatabase(FakeDatabase):
    """Sessions whose every query fails at connect time."""

    def __init__(self, make_session) -> None:
        super().__init__()
        self._make_session = make_session

    @asynccontextmanager
    async def read_session(self) -> AsyncIterator[object]:
        refused = ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)")
        session = self._make_session(query_error=refused)
        self.sessions.append(session)
        yield session


@pytest.mark.asyncio
async def test_unreachable_database_reports_every_part(make_session) -> None:
    load = await BroadcastContentService(UnreachableDatabase(make_session)).load("ART-100")

    assert not load.ok
    assert len(load.errors) == 5
    assert all(isinstance(e, QueryFailure) for e in load.errors)
    assert load.content.info == BroadcastInfo()
    assert load.content.comments == []
