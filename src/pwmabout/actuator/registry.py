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
"""Registered actuator endpoints and their on/off switches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pwmabout.actuator.ports import ActuatorEndpoint

if TYPE_CHECKING:
    from pwmabout.core.config import Config


class ActuatorRegistry:
    def __init__(self, config: Config | None = None) -> None:
        self._config = config
        self._endpoints: dict[str, ActuatorEndpoint] = {}

    def register(self, endpoint: ActuatorEndpoint) -> None:
        """Add *endpoint*; a later registration with the same id replaces it."""
        self._endpoints[endpoint.endpoint_id] = endpoint

    def is_enabled(self, endpoint_id: str) -> bool:
        endpoint = self._endpoints[endpoint_id]
        if self._config is None:
            return endpoint.enabled
        return self._config.get_bool(f"pwm.actuator.endpoints.{endpoint_id}.enabled", default=endpoint.enabled)

    def get_enabled_endpoints(self) -> dict[str, ActuatorEndpoint]:
        return {endpoint_id: ep for endpoint_id, ep in self._endpoints.items() if self.is_enabled(endpoint_id)}
