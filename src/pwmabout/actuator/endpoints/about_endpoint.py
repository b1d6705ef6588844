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
"""About actuator endpoint — the diagnostic property snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from starlette.concurrency import run_in_threadpool

if TYPE_CHECKING:
    from pwmabout.about.aggregator import AboutPropertiesAggregator
    from pwmabout.host.ports import PwmApplication


class AboutEndpoint:
    """Exposes the About-page properties at ``/actuator/about``.

    The response body is a flat JSON object in snapshot (key-sorted) order.
    Collection walks the local DB directory and may open a database
    connection, so it runs in the worker thread pool.
    """

    def __init__(self, aggregator: AboutPropertiesAggregator, app: PwmApplication) -> None:
        self._aggregator = aggregator
        self._app = app

    @property
    def endpoint_id(self) -> str:
        return "about"

    @property
    def enabled(self) -> bool:
        return True

    async def handle(self, context: Any = None) -> dict[str, Any]:
        snapshot = await run_in_threadpool(self._aggregator.snapshot, self._app)
        return {key.value: value for key, value in snapshot.items()}
