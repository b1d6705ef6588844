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
"""structlog-backed :class:`~pwmabout.logging.port.LoggingPort`.

Only the ``pwmabout`` logger tree is touched; the host keeps control of the
root logger and its own handlers.  Levels come from ``pwm.logging.level``::

    pwm:
      logging:
        format: json          # or console
        level:
          root: INFO          # the pwmabout package logger
          about: ERROR        # pwmabout.about, the aggregator
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from pwmabout.core.config import Config

PACKAGE_LOGGER = "pwmabout"


def _qualify(name: str) -> str:
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return name
    return f"{PACKAGE_LOGGER}.{name}"


def _level(value: Any) -> int:
    return logging.getLevelNamesMapping().get(str(value).upper(), logging.INFO)


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


class StructlogAdapter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.format = "console"
        self.levels: dict[str, int] = {}

    def configure(self, config: Config) -> None:
        self.format = str(config.get("pwm.logging.format", "console")).lower()

        configured = dict(config.get_section("pwm.logging.level"))
        self.levels = {PACKAGE_LOGGER: _level(configured.pop("root", "INFO"))}
        self.levels.update({_qualify(str(name)): _level(value) for name, value in configured.items()})

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
                _renderer(self.format),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(self._stream or sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package = logging.getLogger(PACKAGE_LOGGER)
        package.handlers = [handler]
        package.propagate = False
        for name, level in self.levels.items():
            logging.getLogger(name).setLevel(level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(_qualify(name))
