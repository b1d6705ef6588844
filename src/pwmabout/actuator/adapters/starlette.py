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
"""Starlette adapter for actuator endpoints — generates routes from ActuatorRegistry."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from pwmabout.actuator.ports import ActuatorEndpoint
from pwmabout.actuator.registry import ActuatorRegistry


def make_starlette_actuator_routes(registry: ActuatorRegistry) -> list[Route]:
    """Build Starlette ``Route`` objects from all enabled endpoints in *registry*."""
    enabled = registry.get_enabled_endpoints()

    # /actuator lists all enabled endpoints with _links
    async def index_endpoint(request: Request) -> JSONResponse:
        links: dict[str, dict[str, str]] = {"self": {"href": "/actuator"}}
        for eid in enabled:
            links[eid] = {"href": f"/actuator/{eid}"}
        return JSONResponse({"_links": links})

    routes = [Route("/actuator", index_endpoint, methods=["GET"])]
    routes.extend(_make_route(eid, ep) for eid, ep in enabled.items())
    return routes


def _make_route(eid: str, ep: ActuatorEndpoint) -> Route:
    async def handler(request: Request) -> JSONResponse:
        return JSONResponse(await ep.handle(request))

    return Route(f"/actuator/{eid}", handler, methods=["GET"])
