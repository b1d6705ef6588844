"""Tests for SqlAlchemyDatabaseService debug properties."""

import sqlite3
from dataclasses import replace

import pytest
from sqlalchemy import create_engine
from structlog.testing import capture_logs

from pwmabout.about.property import AboutProperty
from pwmabout.data import SqlAlchemyDatabaseService
from pwmabout.host.ports import DatabaseService
from pwmabout.kernel.exceptions import DatabaseException
from pwmabout.testing import minimal_host


@pytest.fixture
def sqlite_service():
    engine = create_engine("sqlite://")
    yield SqlAlchemyDatabaseService(engine)
    engine.dispose()


class TestSqlAlchemyDatabaseService:
    def test_implements_port(self, sqlite_service):
        assert isinstance(sqlite_service, DatabaseService)

    def test_sqlite_properties(self, sqlite_service):
        props = sqlite_service.connection_debug_properties()
        assert props[AboutProperty.database_driverName] == "sqlite+pysqlite"
        assert props[AboutProperty.database_databaseProductName] == "sqlite"
        assert props[AboutProperty.database_databaseProductVersion] == sqlite3.sqlite_version

    def test_keys_stay_in_database_group(self, sqlite_service):
        props = sqlite_service.connection_debug_properties()
        assert {key.group for key in props} == {"database"}

    def test_unreachable_database_raises(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nested' / 'pwm.db'}")
        service = SqlAlchemyDatabaseService(engine)
        with pytest.raises(DatabaseException) as exc_info:
            service.connection_debug_properties()
        assert exc_info.value.code == "DB_DEBUG"
        assert "pwm.db" in exc_info.value.context["url"]


class TestAggregatorWithSqlAlchemy:
    def test_snapshot_includes_database_keys(self, aggregator, sqlite_service):
        snapshot = aggregator.snapshot(replace(minimal_host(), database_service=sqlite_service))
        assert snapshot[AboutProperty.database_driverName] == "sqlite+pysqlite"

    def test_unreachable_database_is_logged(self, aggregator, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'pwm.db'}")
        app = replace(minimal_host(), database_service=SqlAlchemyDatabaseService(engine))
        with capture_logs() as logs:
            snapshot = aggregator.snapshot(app)
        assert [entry["log_level"] for entry in logs] == ["error"]
        assert not [key for key in snapshot if key.group == "database"]
