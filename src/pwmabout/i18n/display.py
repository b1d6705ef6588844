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
"""Display message keys and the locale helper used for About-page values."""

from __future__ import annotations

from enum import StrEnum

from pwmabout.i18n.ports.outbound import MessageSource


class Display(StrEnum):
    """Message codes from the ``display`` bundle section."""

    VALUE_NOT_APPLICABLE = "display.value-not-applicable"


def localize(messages: MessageSource, locale: str, key: Display) -> str:
    """Resolve *key* for *locale*; a missing message falls back to the raw code."""
    return messages.get_message_or_default(key.value, key.value, locale=locale)
