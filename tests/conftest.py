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
"""Shared fixtures for pwm-about tests."""

from __future__ import annotations

import pytest
import structlog

from pwmabout.about.aggregator import AboutPropertiesAggregator
from pwmabout.core.constants import AboutConstants, BuildInfo
from pwmabout.i18n.adapters.resource_bundle import ResourceBundleMessageSource
from pwmabout.testing import fixed_clock


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def constants() -> AboutConstants:
    return AboutConstants(
        servlet_version="PWM v2.1.0 b412 r9f2c1",
        chai_api_version="0.8.6",
        trial_mode=False,
        default_locale="en",
        build=BuildInfo(
            time="2024-04-30T08:00:00Z",
            number="412",
            type="release",
            user="builder",
            revision="9f2c1",
            runtime_vendor="CPython",
            runtime_version="3.12.4",
            version="2.1.0",
        ),
    )


@pytest.fixture
def messages() -> ResourceBundleMessageSource:
    return ResourceBundleMessageSource.packaged(default_locale="en")


@pytest.fixture
def aggregator(constants, messages) -> AboutPropertiesAggregator:
    return AboutPropertiesAggregator(constants, messages, clock=fixed_clock())
