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
"""pwm-about testing — host stubs and snapshot assertions."""

from pwmabout.testing.assertions import assert_keys_absent, assert_snapshot_invariants
from pwmabout.testing.host import (
    StubApplication,
    StubDatabaseService,
    StubEnvironment,
    StubQueue,
    StubVersionChecker,
    fixed_clock,
    full_host,
    minimal_host,
)

__all__ = [
    "StubApplication",
    "StubDatabaseService",
    "StubEnvironment",
    "StubQueue",
    "StubVersionChecker",
    "assert_keys_absent",
    "assert_snapshot_invariants",
    "fixed_clock",
    "full_host",
    "minimal_host",
]
