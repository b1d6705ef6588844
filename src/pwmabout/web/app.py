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
"""About-service web application factory built on Starlette."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.applications import Starlette

from pwmabout.about.aggregator import AboutPropertiesAggregator
from pwmabout.actuator.adapters.starlette import make_starlette_actuator_routes
from pwmabout.actuator.endpoints.about_endpoint import AboutEndpoint
from pwmabout.actuator.registry import ActuatorRegistry
from pwmabout.core.config import Config
from pwmabout.core.constants import AboutConstants
from pwmabout.i18n.adapters.resource_bundle import ResourceBundleMessageSource
from pwmabout.logging.structlog_adapter import StructlogAdapter

if TYPE_CHECKING:
    from pwmabout.actuator.ports import ActuatorEndpoint
    from pwmabout.host.ports import PwmApplication
    from pwmabout.i18n.ports.outbound import MessageSource
    from pwmabout.logging.port import LoggingPort


def create_message_source(config: Config, default_locale: str) -> MessageSource:
    """Packaged bundles, unless ``pwm.i18n.base-path`` points elsewhere."""
    base_path = config.get("pwm.i18n.base-path")
    if base_path:
        return ResourceBundleMessageSource(base_path=str(base_path), default_locale=default_locale)
    return ResourceBundleMessageSource.packaged(default_locale=default_locale)


def create_app(
    app: PwmApplication,
    config: Config | None = None,
    debug: bool = False,
    logging_port: LoggingPort | None = None,
    extra_endpoints: list[ActuatorEndpoint] | None = None,
) -> Starlette:
    """Create a Starlette application serving the actuator endpoints for *app*.

    Without *config*, settings come from :meth:`Config.load` (packaged
    defaults plus the file named by ``PWM_CONFIG_FILE``).

    Startup sequence:
    1. Configure logging (``pwm.logging``)
    2. Bind ``pwm.about`` / ``pwm.build`` constants
    3. Build the message source and the aggregator
    4. Register ``about`` and any *extra_endpoints*, then mount the enabled ones
    """
    if config is None:
        config = Config.load()

    logging_port = logging_port or StructlogAdapter()
    logging_port.configure(config)
    logger = logging_port.get_logger("pwmabout.web")

    constants = AboutConstants.from_config(config)
    messages = create_message_source(config, constants.default_locale)
    aggregator = AboutPropertiesAggregator(constants, messages)

    registry = ActuatorRegistry(config=config)
    registry.register(AboutEndpoint(aggregator, app))
    for endpoint in extra_endpoints or []:
        registry.register(endpoint)

    routes = make_starlette_actuator_routes(registry)
    logger.info(
        "actuator_routes_mounted",
        endpoints=sorted(registry.get_enabled_endpoints()),
        instance_id=app.instance_id,
    )
    return Starlette(debug=debug, routes=routes)
