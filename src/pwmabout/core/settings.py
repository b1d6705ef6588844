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
"""Host settings read by the About page, and the setting reader over Config."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from pwmabout.core.config import Config


class PwmSetting(StrEnum):
    """Configuration keys of the host settings the aggregator consults."""

    PWM_SITE_URL = "pwm.site-url"
    VERSION_CHECK_ENABLE = "pwm.version-check.enabled"
    LDAP_PROFILES = "pwm.ldap.profiles"


class Configuration:
    """Typed setting reader backed by a :class:`Config`.

    Implements the ``HostConfiguration`` port.
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    @property
    def config(self) -> Config:
        return self._config

    def read_setting_as_string(self, setting: PwmSetting) -> str:
        value = self._config.get(setting.value)
        return "" if value is None else str(value)

    def read_setting_as_boolean(self, setting: PwmSetting) -> bool:
        return self._config.get_bool(setting.value)

    def ldap_profiles(self) -> Sequence[Any]:
        """Return the configured directory profiles.

        Profiles may be declared as a list of ids or as a mapping keyed by id.
        """
        profiles = self._config.get(PwmSetting.LDAP_PROFILES.value)
        if not profiles:
            return []
        if isinstance(profiles, dict):
            return list(profiles)
        if isinstance(profiles, str):
            return [p.strip() for p in profiles.split(",") if p.strip()]
        return list(profiles)
