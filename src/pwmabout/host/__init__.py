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
"""Host — ports for the host application's subsystems and process-level facts."""

from pwmabout.host.ports import (
    AuditManager,
    ContextManager,
    DatabaseService,
    HostConfiguration,
    ListManager,
    LocalDB,
    LocalDBLogger,
    MessageQueue,
    PwmApplication,
    PwmEnvironment,
    RandomService,
    RuntimeFacts,
    SecureService,
    SharedHistoryManager,
    VersionChecker,
)
from pwmabout.host.runtime import ProcessRuntime, SecureRandomService
from pwmabout.host.types import ApplicationFlag, BlockAlgorithm, HashAlgorithm

__all__ = [
    "ApplicationFlag",
    "AuditManager",
    "BlockAlgorithm",
    "ContextManager",
    "DatabaseService",
    "HashAlgorithm",
    "HostConfiguration",
    "ListManager",
    "LocalDB",
    "LocalDBLogger",
    "MessageQueue",
    "ProcessRuntime",
    "PwmApplication",
    "PwmEnvironment",
    "RandomService",
    "RuntimeFacts",
    "SecureRandomService",
    "SecureService",
    "SharedHistoryManager",
    "VersionChecker",
]
