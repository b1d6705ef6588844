# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""AboutPropertiesAggregator — one point-in-time snapshot of host diagnostics.

Each property is read from the subsystem that owns it and stored as a
string.  Optional subsystems are tested for presence first and omit their
keys when absent, and a value that comes back
empty is omitted as well.  Only the database debug read is guarded; any other
failure is a host bug and propagates.

No lock is taken, so different keys may reflect slightly different
instants.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog

from pwmabout.about.formatting import format_timestamp
from pwmabout.about.property import AboutProperty
from pwmabout.core.constants import AboutConstants
from pwmabout.core.settings import PwmSetting
from pwmabout.host import filesystem
from pwmabout.host.ports import PwmApplication, RuntimeFacts
from pwmabout.host.types import ApplicationFlag
from pwmabout.i18n.display import Display, localize
from pwmabout.i18n.ports.outbound import MessageSource

_RUNTIME_SYSTEM_PROPERTIES: dict[AboutProperty, str] = {
    AboutProperty.runtime_vmVendor: "python.vendor",
    AboutProperty.runtime_runtimeVersion: "python.runtime.version",
    AboutProperty.runtime_vmVersion: "python.version",
    AboutProperty.runtime_vmName: "python.name",
    AboutProperty.runtime_vmLocation: "python.home",
    AboutProperty.runtime_osName: "os.name",
    AboutProperty.runtime_osVersion: "os.version",
    AboutProperty.runtime_osArch: "os.arch",
}

_MODE_FLAGS: dict[AboutProperty, ApplicationFlag] = {
    AboutProperty.app_mode_appliance: ApplicationFlag.Appliance,
    AboutProperty.app_mode_docker: ApplicationFlag.Docker,
    AboutProperty.app_mode_manageHttps: ApplicationFlag.ManageHttps,
}

# An empty flag list is a meaningful value, not a missing one.
_EMPTY_ALLOWED = frozenset({AboutProperty.app_environmentFlags})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _present(key: AboutProperty, value: str | None) -> bool:
    if value is None:
        return False
    return value != "" or key in _EMPTY_ALLOWED


class AboutPropertiesAggregator:
    """Builds the About-page property snapshot for a running host.

    Args:
        constants: Servlet/build constants and the default display locale.
        messages: Resolves the localized "not applicable" text.
        clock: Source of ``app_currentTime``.
        logger: structlog logger; defaults to ``pwmabout.about``.
    """

    def __init__(
        self,
        constants: AboutConstants,
        messages: MessageSource,
        clock: Callable[[], datetime] = utc_now,
        logger: Any = None,
    ) -> None:
        self._constants = constants
        self._messages = messages
        self._clock = clock
        self._logger = logger if logger is not None else structlog.get_logger("pwmabout.about")

    def snapshot(self, app: PwmApplication) -> Mapping[AboutProperty, str]:
        """Collect every available property into an immutable, key-sorted mapping."""
        about: dict[AboutProperty, str | None] = {}

        self._put_application(about, app)
        self._put_environment(about, app)
        self._put_version_check(about, app)
        self._put_lists_and_queues(about, app)
        self._put_local_db(about, app)
        self._put_build(about)
        self._put_runtime(about, app)
        self._put_database(about, app)

        ordered = {key: about[key] for key in sorted(about, key=lambda k: k.value) if _present(key, about[key])}
        return MappingProxyType(ordered)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def _put_application(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        constants = self._constants
        about[AboutProperty.app_version] = constants.servlet_version
        about[AboutProperty.app_chaiApiVersion] = constants.chai_api_version
        about[AboutProperty.app_currentTime] = self._date(self._clock())
        about[AboutProperty.app_startTime] = self._date(app.startup_time)
        about[AboutProperty.app_installTime] = self._date(app.install_time)
        about[AboutProperty.app_siteUrl] = app.config.read_setting_as_string(PwmSetting.PWM_SITE_URL)
        about[AboutProperty.app_ldapProfileCount] = str(len(app.config.ldap_profiles()))
        about[AboutProperty.app_instanceID] = app.instance_id
        about[AboutProperty.app_trialMode] = _bool(constants.trial_mode)

        secure = app.secure_service
        about[AboutProperty.app_secureBlockAlgorithm] = secure.default_block_algorithm().label
        about[AboutProperty.app_secureHashAlgorithm] = secure.default_hash_algorithm().name

        if app.configuration_restart_counter is not None:
            about[AboutProperty.app_configurationRestartCounter] = str(app.configuration_restart_counter)

    def _put_environment(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        environment = app.environment
        if environment is None:
            return

        flags = set(environment.flags)
        for prop, flag in _MODE_FLAGS.items():
            about[prop] = _bool(flag in flags)
        about[AboutProperty.app_applicationPath] = str(Path(environment.application_path).absolute())
        about[AboutProperty.app_environmentFlags] = ",".join(
            flag.name for flag in ApplicationFlag if flag in flags
        )

        context_manager = environment.context_manager
        if context_manager is not None and context_manager.server_info is not None:
            about[AboutProperty.runtime_appServerInfo] = context_manager.server_info

    def _put_version_check(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        if not app.config.read_setting_as_boolean(PwmSetting.VERSION_CHECK_ENABLE):
            return
        checker = app.version_checker
        if checker is None:
            return
        about[AboutProperty.app_currentPublishedVersion] = checker.current_version()
        about[AboutProperty.app_currentPublishedVersionCheckTime] = self._date(checker.last_read_timestamp())

    def _put_lists_and_queues(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        about[AboutProperty.app_wordlistSize] = str(app.wordlist_manager.size())
        about[AboutProperty.app_seedlistSize] = str(app.seedlist_manager.size())

        history = app.shared_history_manager
        if history is not None:
            about[AboutProperty.app_sharedHistorySize] = str(history.size())
            about[AboutProperty.app_sharedHistoryOldestTime] = self._date(history.oldest_entry_time())

        queues = (
            (app.email_queue, AboutProperty.app_emailQueueSize, AboutProperty.app_emailQueueOldestTime),
            (app.sms_queue, AboutProperty.app_smsQueueSize, AboutProperty.app_smsQueueOldestTime),
        )
        for queue, size_key, oldest_key in queues:
            if queue is None:
                continue
            about[size_key] = str(queue.queue_size())
            eldest = queue.eldest_item()
            if eldest is not None:
                about[oldest_key] = self._date(eldest)

        if app.audit_manager is not None:
            about[AboutProperty.app_syslogQueueSize] = str(app.audit_manager.syslog_queue_size())

    def _put_local_db(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        local_db = app.local_db
        if local_db is None:
            return

        db_logger = app.local_db_logger
        if db_logger is not None:
            about[AboutProperty.app_localDbLogSize] = str(db_logger.stored_event_count())
            about[AboutProperty.app_localDbLogOldestTime] = self._date(db_logger.tail_date())

        location = local_db.file_location()
        if location is not None:
            about[AboutProperty.app_localDbStorageSize] = self._disk_size(filesystem.directory_size(location))
            about[AboutProperty.app_localDbFreeSpace] = self._disk_size(filesystem.disk_space_remaining(location))

    def _put_build(self, about: dict[AboutProperty, str | None]) -> None:
        build = self._constants.build
        about[AboutProperty.build_Time] = build.time
        about[AboutProperty.build_Number] = build.number
        about[AboutProperty.build_Type] = build.type
        about[AboutProperty.build_User] = build.user
        about[AboutProperty.build_Revision] = build.revision
        about[AboutProperty.build_RuntimeVendor] = build.runtime_vendor
        about[AboutProperty.build_RuntimeVersion] = build.runtime_version
        about[AboutProperty.build_Version] = build.version

    def _put_runtime(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        runtime: RuntimeFacts = app.runtime
        about[AboutProperty.runtime_memoryFree] = str(runtime.free_memory())
        about[AboutProperty.runtime_memoryAllocated] = str(runtime.allocated_memory())
        about[AboutProperty.runtime_memoryMax] = str(runtime.max_memory())
        about[AboutProperty.runtime_threadCount] = str(runtime.active_thread_count())
        for prop, name in _RUNTIME_SYSTEM_PROPERTIES.items():
            about[prop] = runtime.system_property(name)
        about[AboutProperty.runtime_randomAlgorithm] = app.random_service.algorithm()
        about[AboutProperty.runtime_defaultCharset] = runtime.default_charset()

    def _put_database(self, about: dict[AboutProperty, str | None], app: PwmApplication) -> None:
        database_service = app.database_service
        if database_service is None:
            return
        try:
            debug_data = dict(database_service.connection_debug_properties())
        except Exception as exc:
            self._logger.error("error reading database debug properties", error=str(exc))
            return

        for key, value in debug_data.items():
            prop = _database_property(key)
            if prop is not None and value is not None:
                about[prop] = str(value)

    def _date(self, value: datetime | date | None) -> str:
        return format_timestamp(value, self._messages, self._constants.default_locale)

    def _disk_size(self, size: int) -> str:
        if size < 0:
            return localize(self._messages, self._constants.default_locale, Display.VALUE_NOT_APPLICABLE)
        return filesystem.format_disk_size(size)


def _database_property(key: object) -> AboutProperty | None:
    """Map a database-service key onto the ``database_*`` namespace, or ``None``."""
    try:
        prop = AboutProperty(str(key))
    except ValueError:
        return None
    return prop if prop.group == "database" else None


def make_info_bean(
    app: PwmApplication,
    constants: AboutConstants,
    messages: MessageSource,
) -> Mapping[AboutProperty, str]:
    """One-shot convenience over :meth:`AboutPropertiesAggregator.snapshot`."""
    return AboutPropertiesAggregator(constants, messages).snapshot(app)
