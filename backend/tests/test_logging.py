"""structlog setup: bound context and library log levels."""
from __future__ import annotations

import logging
from typing import Iterator

import pytest
import structlog

import shared.utils.logging as logging_module
from shared.config import Environment, Settings


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    engine_level = logging.getLogger("sqlalchemy.engine").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
    structlog.contextvars.clear_contextvars()


def _use(monkeypatch: pytest.MonkeyPatch, **overrides) -> None:
    settings = Settings(_env_file=None, **overrides)
    monkeypatch.setattr(logging_module, "get_settings", lambda: settings)


def test_service_context_is_bound(monkeypatch: pytest.MonkeyPatch) -> None:
    _use(monkeypatch, instance_id="pod-7", environment=Environment.STAGING)
    logging_module.setup_logging("content-api", {"region": "eu-north-1"})

    bound = structlog.contextvars.get_contextvars()
    assert bound == {
        "service": "content-api",
        "instance_id": "pod-7",
        "environment": "staging",
        "region": "eu-north-1",
    }


def test_sql_echo_silenced_unless_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    _use(monkeypatch, log_level="DEBUG")
    logging_module.setup_logging("content-api")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("asyncpg").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    logging.getLogger("sqlalchemy.engine").setLevel(logging.NOTSET)
    _use(monkeypatch, debug=True)
    logging_module.setup_logging("content-api")
    assert logging.getLogger("sqlalchemy.engine").level == logging.NOTSET
