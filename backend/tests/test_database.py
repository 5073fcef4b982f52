"""Engine options the DatabaseManager passes to SQLAlchemy."""
from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

import shared.utils.database as database_module
from shared.config import Settings
from shared.utils.database import DatabaseManager


@pytest.fixture
def captured_engine_kwargs(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {}

    def _fake_engine(url: str, **kwargs: Any) -> MagicMock:
        captured["url"] = url
        captured.update(kwargs)
        return MagicMock()

    monkeypatch.setattr(database_module, "create_async_engine", _fake_engine)
    return captured


@pytest.mark.asyncio
async def test_command_timeout_reaches_driver(
    monkeypatch: pytest.MonkeyPatch, captured_engine_kwargs: dict[str, Any]
) -> None:
    monkeypatch.setenv("LB_DB_COMMAND_TIMEOUT", "7")
    await DatabaseManager(Settings(_env_file=None)).connect()

    assert captured_engine_kwargs["connect_args"] == {"timeout": 7, "command_timeout": 7}


@pytest.mark.asyncio
async def test_schema_translation_is_an_engine_option(
    monkeypatch: pytest.MonkeyPatch, captured_engine_kwargs: dict[str, Any]
) -> None:
    monkeypatch.setenv("LB_CONTENT_SCHEMA", "direkt_staging")
    await DatabaseManager(Settings(_env_file=None)).connect()

    translate = captured_engine_kwargs["execution_options"]["schema_translate_map"]
    assert translate["direkt"] == "direkt_staging"
