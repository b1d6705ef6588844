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
"""Host ports — the read-only facade the About page consumes.

Every subsystem of the password-management host is reached through one of
these protocols.  Optional subsystems are typed ``X | None`` on
:class:`PwmApplication`; ``None`` means the subsystem is not running.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pwmabout.host.types import ApplicationFlag, BlockAlgorithm, HashAlgorithm

if TYPE_CHECKING:
    from pwmabout.about.property import AboutProperty
    from pwmabout.core.settings import PwmSetting


@runtime_checkable
class HostConfiguration(Protocol):
    def read_setting_as_string(self, setting: PwmSetting) -> str: ...
    def read_setting_as_boolean(self, setting: PwmSetting) -> bool: ...
    def ldap_profiles(self) -> Collection[Any]: ...


@runtime_checkable
class ContextManager(Protocol):
    """Web-container context; ``server_info`` identifies the hosting server."""

    server_info: str | None


@runtime_checkable
class PwmEnvironment(Protocol):
    application_path: Path
    flags: Collection[ApplicationFlag]
    context_manager: ContextManager | None


@runtime_checkable
class SecureService(Protocol):
    def default_block_algorithm(self) -> BlockAlgorithm: ...
    def default_hash_algorithm(self) -> HashAlgorithm: ...


@runtime_checkable
class ListManager(Protocol):
    """Wordlist and seedlist managers."""

    def size(self) -> int: ...


@runtime_checkable
class SharedHistoryManager(Protocol):
    def size(self) -> int: ...
    def oldest_entry_time(self) -> datetime | None: ...


@runtime_checkable
class MessageQueue(Protocol):
    """Outbound email and SMS queues."""

    def queue_size(self) -> int: ...
    def eldest_item(self) -> datetime | None: ...


@runtime_checkable
class AuditManager(Protocol):
    def syslog_queue_size(self) -> int: ...


@runtime_checkable
class LocalDB(Protocol):
    def file_location(self) -> Path | None: ...


@runtime_checkable
class LocalDBLogger(Protocol):
    def stored_event_count(self) -> int: ...
    def tail_date(self) -> datetime | None: ...


@runtime_checkable
class VersionChecker(Protocol):
    def current_version(self) -> str: ...
    def last_read_timestamp(self) -> datetime | None: ...


@runtime_checkable
class DatabaseService(Protocol):
    def connection_debug_properties(self) -> Mapping[AboutProperty, str]:
        """Driver and product facts; may raise on a misbehaving driver."""
        ...


@runtime_checkable
class RandomService(Protocol):
    def algorithm(self) -> str: ...


@runtime_checkable
class RuntimeFacts(Protocol):
    """Process-level facts: memory, threads, interpreter and OS identity."""

    def free_memory(self) -> int: ...
    def allocated_memory(self) -> int: ...
    def max_memory(self) -> int: ...
    def active_thread_count(self) -> int: ...
    def system_property(self, name: str) -> str | None: ...
    def default_charset(self) -> str: ...


@runtime_checkable
class PwmApplication(Protocol):
    """The running host application, assumed fully initialized."""

    config: HostConfiguration
    instance_id: str
    startup_time: datetime | None
    install_time: datetime | None
    configuration_restart_counter: int | None
    environment: PwmEnvironment | None
    version_checker: VersionChecker | None
    secure_service: SecureService
    wordlist_manager: ListManager
    seedlist_manager: ListManager
    shared_history_manager: SharedHistoryManager | None
    email_queue: MessageQueue | None
    sms_queue: MessageQueue | None
    audit_manager: AuditManager | None
    local_db: LocalDB | None
    local_db_logger: LocalDBLogger | None
    database_service: DatabaseService | None
    random_service: RandomService
    runtime: RuntimeFacts
