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
"""Resource-bundle message source — loads messages from YAML files."""

from __future__ import annotations

import importlib.resources
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


class ResourceBundleMessageSource:
    """Resolves messages from locale-specific YAML resource files.

    File naming convention::

        {base_path}/messages_{locale}.yaml
        {base_path}/messages_{locale}.yml

    Nested keys are flattened with dots, so the YAML structure::

        display:
          value-not-applicable: "n/a"

    is accessed as ``get_message("display.value-not-applicable", locale="en")``.
    A region-qualified locale such as ``de-AT`` falls back to ``de`` before
    the default locale.
    """

    def __init__(
        self,
        base_path: str | Path = "i18n/",
        default_locale: str = "en",
    ) -> None:
        self._base_path = Path(base_path)
        self._default_locale = default_locale
        self._cache: dict[str, dict[str, str]] = {}

    @classmethod
    def packaged(cls, default_locale: str = "en") -> ResourceBundleMessageSource:
        """Message source over the bundles shipped in ``pwmabout.resources``."""
        bundles = importlib.resources.files("pwmabout.resources").joinpath("i18n")
        return cls(base_path=str(bundles), default_locale=default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def get_message(
        self,
        code: str,
        args: tuple[Any, ...] = (),
        locale: str | None = None,
    ) -> str:
        """Resolve *code* for *locale* (default locale when ``None``), substituting positional *args*.

        Raises ``KeyError`` when the code cannot be found in the requested
        locale, its language, or the default locale.
        """
        for candidate in self._candidates(locale):
            template = self._load_bundle(candidate).get(code)
            if template is not None:
                return self._substitute(template, args)

        raise KeyError(f"No message found for code '{code}' in locale '{locale}'")

    def get_message_or_default(
        self,
        code: str,
        default: str,
        args: tuple[Any, ...] = (),
        locale: str | None = None,
    ) -> str:
        try:
            return self.get_message(code, args, locale)
        except KeyError:
            return self._substitute(default, args)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidates(self, locale: str | None) -> list[str]:
        normalized = (locale or self._default_locale).replace("_", "-")
        candidates = [normalized]
        language = normalized.split("-")[0]
        if language != normalized:
            candidates.append(language)
        if self._default_locale not in candidates:
            candidates.append(self._default_locale)
        return candidates

    def _load_bundle(self, locale: str) -> dict[str, str]:
        """Load and cache the message bundle for *locale*."""
        if locale in self._cache:
            return self._cache[locale]

        messages: dict[str, str] = {}
        for ext in (".yaml", ".yml"):
            path = self._base_path / f"messages_{locale}{ext}"
            if path.is_file():
                with path.open(encoding="utf-8") as fh:
                    messages = _flatten(yaml.safe_load(fh) or {})
                break

        self._cache[locale] = messages
        return messages

    @staticmethod
    def _substitute(template: str, args: tuple[Any, ...]) -> str:
        """Replace ``{0}``, ``{1}``, ... placeholders with *args*."""
        result = template
        for idx, arg in enumerate(args):
            result = result.replace(f"{{{idx}}}", str(arg))
        return result


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a nested dict into dot-separated keys with string values."""
    items: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.update(_flatten(value, full_key))
        else:
            items[full_key] = str(value)
    return items
