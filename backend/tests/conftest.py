"""Shared fakes for the content tests: a session whose results are canned rows."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError


class FakeResult:
    """Buffered result as returned by AsyncSession.execute."""

    def __init__(self, rows: Iterable[Any]) -> None:
        self._rows = list(rows)
        self.closed = False

    def first(self) -> Any:
        self.closed = True
        return self._rows[0] if self._rows else None


class FakeStream:
    """Streaming result as returned by AsyncSession.stream."""

    def __init__(self, rows: Iterable[Any], fail_at: Optional[int] = None) -> None:
        self._rows = list(rows)
        self._fail_at = fail_at
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for i, row in enumerate(self._rows):
            if i == self._fail_at:
                raise OperationalError("SELECT ...", {}, Exception("connection lost"))
            yield row

    async def close(self) -> None:
        self.closed = True


def storage_error() -> OperationalError:
    return OperationalError("SELECT ...", {}, Exception("server has gone away"))


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """Build a session mock. ``rows`` feed both execute() and stream().

    ``query_error`` is raised by execute()/stream() themselves; ``fail_query``
    is shorthand for a SQLAlchemy OperationalError.
    """

    def _make(
        rows: Iterable[Any] = (),
        *,
        fail_query: bool = False,
        query_error: Optional[BaseException] = None,
        fail_at: Optional[int] = None,
    ) -> MagicMock:
        rows = list(rows)
        session = MagicMock()
        session.result = FakeResult(rows)
        session.stream_result = FakeStream(rows, fail_at=fail_at)
        if fail_query and query_error is None:
            query_error = storage_error()
        if query_error is not None:
            session.execute = AsyncMock(side_effect=query_error)
            session.stream = AsyncMock(side_effect=query_error)
        else:
            session.execute = AsyncMock(return_value=session.result)
            session.stream = AsyncMock(return_value=session.stream_result)
        return session

    return _make


@pytest.fixture
def make_comment_row() -> Callable[..., dict[str, Any]]:
    def _make(guid: str, **overrides: Any) -> dict[str, Any]:
        row: dict[str, Any] = {
            "id": 1,
            "article_id": "ART-100",
            "comment_guid": guid,
            "report_guid": None,
            "broadcast_id": 10,
            "text": f"comment {guid}",
            "status": "published",
            "parent_comment_guid": None,
            "is_pinned": False,
            "published_by_user_id": None,
            "created_at": "2024-05-01T18:00:00",
            "updated_at": None,
            "written_at": "2024-05-01T17:59:30",
            "ifr_user_id": None,
            "user_name": None,
            "email": None,
            "profile_pic": None,
            "img_rotation": None,
            "alias": None,
            "alias_profile_pic": None,
            "alias_img_rotation": None,
            "guest_user_name": "Guest",
            "guest_email": "guest@example.com",
        }
        row.update(overrides)
        return row

    return _make
