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
"""Host constants injected into the aggregator instead of process globals."""

from __future__ import annotations

from dataclasses import dataclass, field

from pwmabout import __version__
from pwmabout.core.config import Config, config_properties


@config_properties(prefix="pwm.build")
@dataclass(frozen=True)
class BuildInfo:
    """Compile-time build metadata (pwm.build.*)."""

    time: str = "unknown"
    number: str = "0"
    type: str = "dev"
    user: str = "unknown"
    revision: str = "unknown"
    runtime_vendor: str = "unknown"
    runtime_version: str = "unknown"
    version: str = __version__


@config_properties(prefix="pwm.about")
@dataclass(frozen=True)
class AboutConstants:
    """Application constants reported on the About page (pwm.about.*)."""

    servlet_version: str = f"v{__version__}"
    chai_api_version: str = "unknown"
    trial_mode: bool = False
    default_locale: str = "en"
    build: BuildInfo = field(default_factory=BuildInfo)

    @classmethod
    def from_config(cls, config: Config) -> AboutConstants:
        """Bind ``pwm.about`` and ``pwm.build`` into one constants object."""
        about = config.bind(cls)
        return AboutConstants(
            servlet_version=about.servlet_version,
            chai_api_version=about.chai_api_version,
            trial_mode=about.trial_mode,
            default_locale=about.default_locale,
            build=config.bind(BuildInfo),
        )
