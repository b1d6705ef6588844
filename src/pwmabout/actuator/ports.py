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
"""Management endpoint seam mounted under ``/actuator``."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ActuatorEndpoint(Protocol):
    """A read-only diagnostic resource served at ``/actuator/<endpoint_id>``.

    ``enabled`` is the endpoint's own default; the registry lets
    ``pwm.actuator.endpoints.<endpoint_id>.enabled`` override it.  ``handle``
    receives the incoming request and returns a JSON-ready mapping.
    """

    @property
    def endpoint_id(self) -> str: ...

    @property
    def enabled(self) -> bool: ...

    async def handle(self, context: Any = None) -> dict[str, Any]: ...
