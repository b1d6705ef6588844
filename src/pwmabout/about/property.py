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
"""AboutProperty — the closed set of diagnostic property names.

The string form of each member is part of the external contract: About-page
templates and support tooling key on it.
"""

from __future__ import annotations

from enum import StrEnum, auto


class AboutProperty(StrEnum):
    """Well-known About-page property names, grouped by prefix."""

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return name

    app_version = auto()
    app_chaiApiVersion = auto()
    app_currentTime = auto()
    app_startTime = auto()
    app_installTime = auto()
    app_currentPublishedVersion = auto()
    app_currentPublishedVersionCheckTime = auto()
    app_siteUrl = auto()
    app_instanceID = auto()
    app_trialMode = auto()
    app_mode_appliance = auto()
    app_mode_docker = auto()
    app_mode_manageHttps = auto()
    app_applicationPath = auto()
    app_environmentFlags = auto()
    app_wordlistSize = auto()
    app_seedlistSize = auto()
    app_sharedHistorySize = auto()
    app_sharedHistoryOldestTime = auto()
    app_emailQueueSize = auto()
    app_emailQueueOldestTime = auto()
    app_smsQueueSize = auto()
    app_smsQueueOldestTime = auto()
    app_syslogQueueSize = auto()
    app_localDbLogSize = auto()
    app_localDbLogOldestTime = auto()
    app_localDbStorageSize = auto()
    app_localDbFreeSpace = auto()
    app_configurationRestartCounter = auto()
    app_secureBlockAlgorithm = auto()
    app_secureHashAlgorithm = auto()
    app_ldapProfileCount = auto()

    build_Time = auto()
    build_Number = auto()
    build_Type = auto()
    build_User = auto()
    build_Revision = auto()
    build_RuntimeVendor = auto()
    build_RuntimeVersion = auto()
    build_Version = auto()

    runtime_memoryFree = auto()
    runtime_memoryAllocated = auto()
    runtime_memoryMax = auto()
    runtime_threadCount = auto()
    runtime_vmVendor = auto()
    runtime_vmLocation = auto()
    runtime_vmVersion = auto()
    runtime_runtimeVersion = auto()
    runtime_vmName = auto()
    runtime_osName = auto()
    runtime_osVersion = auto()
    runtime_osArch = auto()
    runtime_randomAlgorithm = auto()
    runtime_defaultCharset = auto()
    runtime_appServerInfo = auto()

    database_driverName = auto()
    database_driverVersion = auto()
    database_databaseProductName = auto()
    database_databaseProductVersion = auto()

    @property
    def group(self) -> str:
        """Prefix before the first underscore: ``app``, ``build``, ``runtime`` or ``database``."""
        return self.value.split("_", 1)[0]

    @classmethod
    def in_group(cls, group: str) -> list[AboutProperty]:
        return [prop for prop in cls if prop.group == group]
