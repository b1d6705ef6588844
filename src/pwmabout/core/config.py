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
"""pwm-about configuration: packaged defaults, one host file, env overrides.

Values are addressed with dot-notation keys (``pwm.about.default_locale``).
A ``PWM_*`` environment variable always wins over file values, and string
values may reference other keys or variables with ``${key:default}``.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

CONFIG_FILE_ENV = "PWM_CONFIG_FILE"

_DEFAULTS_RESOURCE = "pwm-defaults.yaml"
_PREFIX_ATTR = "__pwm_config_prefix__"
_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10
_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Bind a dataclass to the config section at *prefix* (see :meth:`Config.bind`)."""

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def _env_key(key: str) -> str:
    # pwm.version-check.enabled -> PWM_VERSION_CHECK_ENABLED
    return "PWM_" + key.removeprefix("pwm.").upper().replace(".", "_").replace("-", "_")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_STRINGS


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_file(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with path.open("rb") as fh:
            return tomllib.load(fh)
    with path.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


class Config:
    """Read-only view over a nested settings dict."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, config_file: str | Path | None = None) -> Config:
        """Packaged defaults overlaid with the host's config file.

        The file is *config_file* or, when omitted, the path in
        ``PWM_CONFIG_FILE``.  ``.toml`` files are read with ``tomllib``;
        anything else is YAML.

        Raises:
            FileNotFoundError: If a config file is named but does not exist.
        """
        data = cls.load_defaults()
        named = config_file if config_file is not None else os.environ.get(CONFIG_FILE_ENV)
        if named:
            path = Path(named)
            if not path.is_file():
                raise FileNotFoundError(f"pwm config file not found: {path}")
            data = _merge(data, _read_file(path))
        return cls(data)

    @staticmethod
    def load_defaults() -> dict[str, Any]:
        resource = importlib.resources.files("pwmabout.resources").joinpath(_DEFAULTS_RESOURCE)
        return yaml.safe_load(resource.read_text(encoding="utf-8")) or {}

    def get(self, key: str, default: Any = None) -> Any:
        env_value = os.environ.get(_env_key(key))
        if env_value is not None:
            return env_value

        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, str) and "${" in value:
            return self._expand(value)
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        return default if value is None else _as_bool(value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Instantiate a ``@config_properties`` dataclass from its section.

        Keys missing from the section keep the dataclass default.  String
        values are coerced to ``int``, ``float`` or ``bool`` fields so that
        env-style settings bind cleanly.

        Raises:
            ValueError: If *config_cls* carries no prefix, or a placeholder
                cannot be resolved.
        """
        prefix = getattr(config_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)
        hints = get_type_hints(config_cls)
        kwargs = {
            field.name: self._coerce(section[field.name], hints.get(field.name))
            for field in dataclasses.fields(config_cls)  # type: ignore[arg-type]
            if field.name in section
        }
        return config_cls(**kwargs)

    def _coerce(self, value: Any, expected: Any) -> Any:
        if isinstance(value, str) and "${" in value:
            value = self._expand(value)
        if value is None:
            return None
        if expected is bool:
            return _as_bool(value)
        if expected in (int, float, str):
            return expected(value)
        return value

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def _expand(self, value: str, depth: int = 0) -> str:
        if depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Max recursion depth exceeded resolving placeholders in '{value}'")

        def substitute(match: re.Match[str]) -> str:
            ref, _, fallback = match.group(1).partition(":")
            from_env = os.environ.get(ref)
            if from_env is not None:
                return from_env
            found = self._lookup(ref)
            if found is not None:
                text = str(found)
                return self._expand(text, depth + 1) if "${" in text else text
            if ":" in match.group(1):
                return fallback
            raise ValueError(f"Cannot resolve placeholder '${{{match.group(1)}}}'")

        return _PLACEHOLDER_RE.sub(substitute, value)
