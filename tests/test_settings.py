"""
Settings resolution, logging setup and bootstrap.
"""

import importlib
import logging

from borrower_ledger import bootstrap
from borrower_ledger.logging_setup import configure_ledger_debug_logging, configure_logging
from borrower_ledger.settings import Settings, resolve_engine_kwargs, resolve_session_kwargs
from tests.helpers import IDENTITY_POOL, sqlite_url


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LEDGER_DB_CONNECTION", "postgresql+asyncpg://u:p@db/ledger")
    monkeypatch.setenv("LEDGER_ENGINE_KWARGS", '{"pool_size": 5}')
    monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.db_connection == "postgresql+asyncpg://u:p@db/ledger"
    assert settings.db.engine_kwargs == {"pool_size": 5}
    assert settings.log_level == "DEBUG"
    assert not settings.db.is_sqlite


def test_engine_kwargs_defaults_depend_on_backend():
    assert resolve_engine_kwargs("sqlite+aiosqlite:///x.db", None) == {"echo": False}
    assert resolve_engine_kwargs("postgresql+asyncpg://db/x", {"echo": True}) == {
        "echo": True,
        "pool_pre_ping": True,
    }


def test_session_kwargs_keep_objects_loaded_after_commit():
    assert resolve_session_kwargs(None) == {"expire_on_commit": False}
    assert resolve_session_kwargs({"autoflush": False}) == {
        "expire_on_commit": False,
        "autoflush": False,
    }


def test_configure_logging_quiets_storage_drivers():
    configure_logging("DEBUG")

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("aiosqlite").level == logging.WARNING


def test_debug_logging_targets_named_components():
    configure_ledger_debug_logging("borrowers, migration")

    assert logging.getLogger("borrower_ledger.coordinators.borrowers").level == logging.DEBUG
    assert logging.getLogger("borrower_ledger.coordinators.migration").level == logging.DEBUG


def test_bootstrap_creates_schema(run, tmp_path):
    ledger = run(
        bootstrap(IDENTITY_POOL, db_connection=sqlite_url(tmp_path / "boot.db"), create_tables=True)
    )

    try:
        run(ledger.set("alice", 10))
        assert run(ledger.load("alice")).limit == 10
    finally:
        run(ledger.close())


def test_bootstrap_applies_configured_log_level(run, tmp_path, monkeypatch):
    bootstrap_module = importlib.import_module("borrower_ledger.bootstrap")
    levels: list[str] = []
    monkeypatch.setattr(bootstrap_module, "configure_logging", levels.append)
    monkeypatch.setenv("LEDGER_LOG_LEVEL", "WARNING")

    ledger = run(
        bootstrap(
            IDENTITY_POOL,
            db_connection=sqlite_url(tmp_path / "boot.db"),
            create_tables=True,
            setup_logging=True,
        )
    )
    run(ledger.close())

    assert levels == ["WARNING"]


def test_bootstrap_leaves_logging_alone_by_default(run, tmp_path, monkeypatch):
    bootstrap_module = importlib.import_module("borrower_ledger.bootstrap")
    levels: list[str] = []
    monkeypatch.setattr(bootstrap_module, "configure_logging", levels.append)

    ledger = run(bootstrap(IDENTITY_POOL, db_connection=sqlite_url(tmp_path / "boot.db")))
    run(ledger.close())

    assert levels == []
