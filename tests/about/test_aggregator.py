"""Tests for AboutPropertiesAggregator snapshot assembly."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone

import pytest
from structlog.testing import capture_logs

from pwmabout.about.aggregator import AboutPropertiesAggregator, make_info_bean
from pwmabout.about.property import AboutProperty as P
from pwmabout.core.config import Config
from pwmabout.core.settings import Configuration
from pwmabout.host.types import ApplicationFlag
from pwmabout.kernel.exceptions import DatabaseException
from pwmabout.testing import (
    StubDatabaseService,
    StubEnvironment,
    StubQueue,
    StubVersionChecker,
    assert_keys_absent,
    assert_snapshot_invariants,
    fixed_clock,
    full_host,
    minimal_host,
)
from pwmabout.testing.host import StubContextManager, StubLocalDB, StubSharedHistory, stub_configuration

MINIMAL_KEYS = (
    {
        P.app_version,
        P.app_chaiApiVersion,
        P.app_currentTime,
        P.app_startTime,
        P.app_installTime,
        P.app_siteUrl,
        P.app_ldapProfileCount,
        P.app_instanceID,
        P.app_trialMode,
        P.app_secureBlockAlgorithm,
        P.app_secureHashAlgorithm,
        P.app_wordlistSize,
        P.app_seedlistSize,
    }
    | set(P.in_group("build"))
    | (set(P.in_group("runtime")) - {P.runtime_appServerInfo})
)

ENVIRONMENT_KEYS = [
    P.app_mode_appliance,
    P.app_mode_docker,
    P.app_mode_manageHttps,
    P.app_applicationPath,
    P.app_environmentFlags,
]


@pytest.fixture
def local_db_dir(tmp_path):
    db_dir = tmp_path / "LocalDB"
    (db_dir / "logs").mkdir(parents=True)
    (db_dir / "pwm.db").write_bytes(b"x" * 2000)
    (db_dir / "logs" / "events.log").write_bytes(b"y" * 500)
    return db_dir


# ---------------------------------------------------------------------------
# Minimal host
# ---------------------------------------------------------------------------


class TestMinimalHost:
    def test_expected_key_set(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert set(snapshot) == MINIMAL_KEYS

    def test_no_optional_groups(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert not [k for k in snapshot if k.startswith("app_mode_")]
        assert not [k for k in snapshot if k.group == "database"]
        assert_keys_absent(snapshot, ENVIRONMENT_KEYS)

    def test_invariants(self, aggregator):
        assert_snapshot_invariants(aggregator.snapshot(minimal_host()))

    def test_application_values(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert snapshot[P.app_version] == "PWM v2.1.0 b412 r9f2c1"
        assert snapshot[P.app_chaiApiVersion] == "0.8.6"
        assert snapshot[P.app_siteUrl] == "https://pwm.example.com/pwm"
        assert snapshot[P.app_instanceID] == "A1B2C3D4E5F6"
        assert snapshot[P.app_trialMode] == "false"
        assert snapshot[P.app_ldapProfileCount] == "1"
        assert snapshot[P.app_secureBlockAlgorithm] == "AES128-GCM"
        assert snapshot[P.app_secureHashAlgorithm] == "SHA512"
        assert snapshot[P.app_wordlistSize] == "38000"
        assert snapshot[P.app_seedlistSize] == "1200"

    def test_timestamps(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert snapshot[P.app_currentTime] == "2024-05-01T12:34:56.789Z"
        assert snapshot[P.app_startTime] == "2024-05-01T12:00:00Z"
        assert snapshot[P.app_installTime] == "2023-01-01T00:00:00Z"

    def test_current_time_after_start_after_install(self, constants, messages):
        aggregator = AboutPropertiesAggregator(constants, messages)
        snapshot = aggregator.snapshot(minimal_host())
        current = datetime.fromisoformat(snapshot[P.app_currentTime])
        start = datetime.fromisoformat(snapshot[P.app_startTime])
        install = datetime.fromisoformat(snapshot[P.app_installTime])
        assert current >= start >= install

    def test_build_values(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert snapshot[P.build_Number] == "412"
        assert snapshot[P.build_Type] == "release"
        assert snapshot[P.build_Revision] == "9f2c1"
        assert snapshot[P.build_RuntimeVendor] == "CPython"
        assert snapshot[P.build_Version] == "2.1.0"

    def test_runtime_values(self, aggregator):
        snapshot = aggregator.snapshot(minimal_host())
        assert snapshot[P.runtime_memoryFree] == "512000000"
        assert snapshot[P.runtime_memoryAllocated] == "128000000"
        assert snapshot[P.runtime_memoryMax] == "8000000000"
        assert snapshot[P.runtime_threadCount] == "7"
        assert snapshot[P.runtime_vmVendor] == "CPython"
        assert snapshot[P.runtime_vmName] == "cpython"
        assert snapshot[P.runtime_vmLocation] == "/usr/local"
        assert snapshot[P.runtime_osArch] == "x86_64"
        assert snapshot[P.runtime_randomAlgorithm] == "SystemRandom (os.urandom)"
        assert snapshot[P.runtime_defaultCharset] == "utf-8"

    def test_unknown_system_property_omits_key(self, aggregator):
        app = minimal_host()
        del app.runtime.properties["os.version"]
        snapshot = aggregator.snapshot(app)
        assert P.runtime_osVersion not in snapshot
        assert P.runtime_osName in snapshot

    def test_deterministic_with_fixed_clock(self, aggregator):
        app = minimal_host()
        assert list(aggregator.snapshot(app).items()) == list(aggregator.snapshot(app).items())


# ---------------------------------------------------------------------------
# Full host, empty queues
# ---------------------------------------------------------------------------


class TestFullHost:
    def test_invariants(self, aggregator, local_db_dir):
        assert_snapshot_invariants(aggregator.snapshot(full_host(local_db_dir)))

    def test_environment_keys(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert snapshot[P.app_mode_appliance] == "true"
        assert snapshot[P.app_mode_docker] == "true"
        assert snapshot[P.app_mode_manageHttps] == "false"
        assert snapshot[P.app_applicationPath] == str(local_db_dir.parent)
        assert snapshot[P.app_environmentFlags] == "Appliance,Docker"
        assert snapshot[P.runtime_appServerInfo] == "uvicorn/0.30.1"

    def test_empty_queues(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert snapshot[P.app_emailQueueSize] == "0"
        assert snapshot[P.app_smsQueueSize] == "0"
        assert_keys_absent(snapshot, [P.app_emailQueueOldestTime, P.app_smsQueueOldestTime])
        assert snapshot[P.app_syslogQueueSize] == "3"

    def test_shared_history(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert snapshot[P.app_sharedHistorySize] == "42"
        assert snapshot[P.app_sharedHistoryOldestTime] == "2023-01-01T00:00:00Z"

    def test_local_db(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert snapshot[P.app_localDbLogSize] == "1500"
        assert snapshot[P.app_localDbLogOldestTime] == "2024-05-01T12:00:00Z"
        assert snapshot[P.app_localDbStorageSize] == "2.5 KB"
        assert snapshot[P.app_localDbFreeSpace]

    def test_database_keys(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert snapshot[P.database_driverName] == "postgresql+psycopg"
        assert snapshot[P.database_driverVersion] == "3.1.19"
        assert snapshot[P.database_databaseProductName] == "postgresql"
        assert snapshot[P.database_databaseProductVersion] == "16.3"

    def test_superset_of_minimal(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        assert MINIMAL_KEYS <= set(snapshot)

    def test_snapshot_is_read_only(self, aggregator, local_db_dir):
        snapshot = aggregator.snapshot(full_host(local_db_dir))
        with pytest.raises(TypeError):
            snapshot[P.app_version] = "tampered"  # type: ignore[index]


# ---------------------------------------------------------------------------
# Optional subsystem guards
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_empty_flags_render_empty_string(self, aggregator):
        app = replace(minimal_host(), environment=StubEnvironment())
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_environmentFlags] == ""
        assert snapshot[P.app_mode_docker] == "false"
        assert_snapshot_invariants(snapshot)

    def test_manage_https_flag(self, aggregator):
        env = StubEnvironment(flags=frozenset({ApplicationFlag.ManageHttps}))
        snapshot = aggregator.snapshot(replace(minimal_host(), environment=env))
        assert snapshot[P.app_mode_manageHttps] == "true"
        assert snapshot[P.app_environmentFlags] == "ManageHttps"

    def test_no_context_manager_omits_server_info(self, aggregator):
        snapshot = aggregator.snapshot(replace(minimal_host(), environment=StubEnvironment()))
        assert P.runtime_appServerInfo not in snapshot

    def test_context_manager_without_server_info(self, aggregator):
        env = StubEnvironment(context_manager=StubContextManager(server_info=None))
        snapshot = aggregator.snapshot(replace(minimal_host(), environment=env))
        assert P.runtime_appServerInfo not in snapshot


class TestVersionCheck:
    def test_enabled_without_checker(self, aggregator):
        app = replace(minimal_host(), config=stub_configuration(version_check=True))
        snapshot = aggregator.snapshot(app)
        assert_keys_absent(snapshot, [P.app_currentPublishedVersion, P.app_currentPublishedVersionCheckTime])

    def test_enabled_with_checker(self, aggregator):
        checker = StubVersionChecker(version="2.2.0", last_read=datetime(2024, 4, 30, 6, 0, tzinfo=timezone.utc))
        app = replace(minimal_host(), config=stub_configuration(version_check=True), version_checker=checker)
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_currentPublishedVersion] == "2.2.0"
        assert snapshot[P.app_currentPublishedVersionCheckTime] == "2024-04-30T06:00:00Z"

    def test_checker_never_read(self, aggregator):
        app = replace(
            minimal_host(),
            config=stub_configuration(version_check=True),
            version_checker=StubVersionChecker(last_read=None),
        )
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_currentPublishedVersionCheckTime] == "n/a"

    def test_disabled_with_checker(self, aggregator):
        app = replace(minimal_host(), version_checker=StubVersionChecker())
        snapshot = aggregator.snapshot(app)
        assert P.app_currentPublishedVersion not in snapshot


class TestQueues:
    def test_null_eldest_on_non_empty_queue(self, aggregator):
        app = replace(minimal_host(), email_queue=StubQueue(size=5, eldest=None))
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_emailQueueSize] == "5"
        assert P.app_emailQueueOldestTime not in snapshot

    def test_eldest_item_formatted(self, aggregator):
        eldest = datetime(2024, 5, 1, 11, 59, 30, 250000, tzinfo=timezone.utc)
        app = replace(minimal_host(), sms_queue=StubQueue(size=2, eldest=eldest))
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_smsQueueSize] == "2"
        assert snapshot[P.app_smsQueueOldestTime] == "2024-05-01T11:59:30.250Z"
        assert P.app_emailQueueSize not in snapshot

    def test_shared_history_at_instant(self, aggregator):
        oldest = datetime(2022, 7, 14, 9, 30, 15, 123000, tzinfo=timezone.utc)
        app = replace(minimal_host(), shared_history_manager=StubSharedHistory(entries=9, oldest=oldest))
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_sharedHistoryOldestTime] == "2022-07-14T09:30:15.123Z"


class TestLocalDb:
    def test_without_logger_reports_storage_only(self, aggregator, local_db_dir):
        app = replace(minimal_host(), local_db=StubLocalDB(location=local_db_dir))
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_localDbStorageSize] == "2.5 KB"
        assert_keys_absent(snapshot, [P.app_localDbLogSize, P.app_localDbLogOldestTime])

    def test_missing_location(self, aggregator, tmp_path):
        app = replace(minimal_host(), local_db=StubLocalDB(location=tmp_path / "gone"))
        snapshot = aggregator.snapshot(app)
        assert snapshot[P.app_localDbStorageSize] == "0 bytes"
        assert snapshot[P.app_localDbFreeSpace] == "n/a"

    def test_missing_location_follows_default_locale(self, constants, messages, tmp_path):
        german = AboutPropertiesAggregator(replace(constants, default_locale="de"), messages, clock=fixed_clock())
        snapshot = german.snapshot(replace(minimal_host(), local_db=StubLocalDB(location=tmp_path / "gone")))
        assert snapshot[P.app_localDbFreeSpace] == "k. A."


class TestDatabaseDebug:
    def test_failure_logs_once_and_omits_database_keys(self, aggregator, local_db_dir):
        app = full_host(local_db_dir)
        app.database_service = StubDatabaseService(error=RuntimeError("driver exploded"))

        with capture_logs() as logs:
            snapshot = aggregator.snapshot(app)

        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["event"] == "error reading database debug properties"
        assert not [k for k in snapshot if k.group == "database"]

    def test_failure_keeps_every_other_key(self, aggregator, local_db_dir):
        healthy = aggregator.snapshot(full_host(local_db_dir))
        app = full_host(local_db_dir)
        app.database_service = StubDatabaseService(error=DatabaseException("down", code="DB_DEBUG"))
        with capture_logs():
            failed = aggregator.snapshot(app)
        assert set(failed) == {k for k in healthy if k.group != "database"}

    def test_string_keys_accepted(self, aggregator):
        service = StubDatabaseService(properties={"database_driverName": "sqlite+pysqlite"})
        snapshot = aggregator.snapshot(replace(minimal_host(), database_service=service))
        assert snapshot[P.database_driverName] == "sqlite+pysqlite"

    def test_foreign_keys_dropped(self, aggregator):
        service = StubDatabaseService(
            properties={
                "database_poolSize": "10",
                P.app_version: "spoofed",
                P.database_databaseProductName: "oracle",
                P.database_driverVersion: None,
            }
        )
        snapshot = aggregator.snapshot(replace(minimal_host(), database_service=service))
        assert snapshot[P.app_version] == "PWM v2.1.0 b412 r9f2c1"
        assert snapshot[P.database_databaseProductName] == "oracle"
        assert P.database_driverVersion not in snapshot
        assert_snapshot_invariants(snapshot)


class TestEdgeCases:
    def test_zero_ldap_profiles(self, aggregator):
        app = replace(minimal_host(), config=stub_configuration(ldap_profiles=[]))
        assert aggregator.snapshot(app)[P.app_ldapProfileCount] == "0"

    def test_unset_site_url_omitted(self, aggregator):
        app = replace(minimal_host(), config=Configuration(Config(Config.load_defaults())))
        snapshot = aggregator.snapshot(app)
        assert P.app_siteUrl not in snapshot
        assert_snapshot_invariants(snapshot)

    def test_empty_build_field_omitted(self, constants, messages):
        build = replace(constants.build, revision="")
        unrevised = AboutPropertiesAggregator(replace(constants, build=build), messages, clock=fixed_clock())
        snapshot = unrevised.snapshot(minimal_host())
        assert P.build_Revision not in snapshot
        assert snapshot[P.build_Number] == "412"

    def test_null_install_time_is_not_applicable(self, aggregator):
        snapshot = aggregator.snapshot(replace(minimal_host(), install_time=None))
        assert snapshot[P.app_installTime] == "n/a"

    def test_not_applicable_follows_default_locale(self, constants, messages):
        german = AboutPropertiesAggregator(replace(constants, default_locale="de"), messages, clock=fixed_clock())
        snapshot = german.snapshot(replace(minimal_host(), install_time=None))
        assert snapshot[P.app_installTime] == "k. A."

    def test_trial_mode(self, constants, messages):
        trial = AboutPropertiesAggregator(replace(constants, trial_mode=True), messages, clock=fixed_clock())
        assert trial.snapshot(minimal_host())[P.app_trialMode] == "true"

    def test_configuration_restart_counter(self, aggregator):
        snapshot = aggregator.snapshot(replace(minimal_host(), configuration_restart_counter=2))
        assert snapshot[P.app_configurationRestartCounter] == "2"

    def test_calendar_date_start_time(self, aggregator):
        snapshot = aggregator.snapshot(replace(minimal_host(), startup_time=date(2024, 5, 1)))
        assert snapshot[P.app_startTime] == "2024-05-01T00:00:00Z"

    def test_non_optional_failure_propagates(self, aggregator):
        app = minimal_host()

        class BrokenWordlist:
            def size(self) -> int:
                raise RuntimeError("wordlist not loaded")

        app.wordlist_manager = BrokenWordlist()  # type: ignore[assignment]
        with pytest.raises(RuntimeError, match="wordlist not loaded"):
            aggregator.snapshot(app)

    def test_make_info_bean(self, constants, messages):
        snapshot = make_info_bean(minimal_host(), constants, messages)
        assert set(snapshot) == MINIMAL_KEYS
