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
"""Seam for resolving localized display text."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessageSource(Protocol):
    """Looks up message codes such as ``display.value-not-applicable``.

    A ``locale`` of ``None`` means the source's own default locale.
    ``get_message`` raises ``KeyError`` for an unknown code;
    ``get_message_or_default`` returns *default* instead.
    """

    @property
    def default_locale(self) -> str: ...

    def get_message(self, code: str, args: tuple[Any, ...] = (), locale: str | None = None) -> str: ...

    def get_message_or_default(
        self, code: str, default: str, args: tuple[Any, ...] = (), locale: str | None = None
    ) -> str: ...
