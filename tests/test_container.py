from __future__ import annotations

from types import SimpleNamespace

import pytest

import smartattend.main as main_module
from smartattend.config import testing as testing_settings
from smartattend.container import build_store, store_backend
from smartattend.database.connection import DatabaseConnection
from smartattend.main import create_app
from smartattend.storage.memory_store import InMemoryRecordStore
from smartattend.storage.mysql_store import MySQLRecordStore


@pytest.mark.parametrize("value", ["mysql", "MySQL", " MYSQL "])
def test_store_backend_is_case_insensitive(value):
    assert store_backend(SimpleNamespace(STORE_BACKEND=value)) == "mysql"


def test_build_store_picks_backend(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_instance", None)

    assert isinstance(build_store(SimpleNamespace(STORE_BACKEND="MySQL", DB_CONFIG={})), MySQLRecordStore)
    assert isinstance(build_store(SimpleNamespace(STORE_BACKEND="Memory")), InMemoryRecordStore)
    with pytest.raises(ValueError):
        build_store(SimpleNamespace(STORE_BACKEND="redis"))


def test_create_app_applies_schema_for_mixed_case_mysql(monkeypatch):
    applied = []
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(testing_settings, "STORE_BACKEND", "MySQL")
    monkeypatch.setattr(testing_settings, "AUTO_INIT_DB", True)
    monkeypatch.setattr(main_module, "apply_schema", lambda db_config: applied.append(db_config))
    monkeypatch.setattr(main_module, "list_tables", lambda db_config: ["kv_collections"])
    monkeypatch.setattr(main_module, "build_store", lambda settings: InMemoryRecordStore())

    create_app()

    assert applied == [testing_settings.DB_CONFIG]
