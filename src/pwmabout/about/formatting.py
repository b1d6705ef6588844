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
"""Timestamp rendering for About-page values."""

from __future__ import annotations

import functools
from datetime import date, datetime, time, timezone

from pwmabout.i18n.display import Display, localize
from pwmabout.i18n.ports.outbound import MessageSource


def format_instant(value: datetime) -> str:
    """Render *value* as an ISO-8601 UTC instant, e.g. ``2024-05-01T12:34:56.789Z``.

    Naive datetimes are taken to be UTC.  The fraction is omitted when zero,
    and printed with millisecond precision when that loses nothing.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)

    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    micros = value.microsecond
    if micros == 0:
        return f"{text}Z"
    if micros % 1000 == 0:
        return f"{text}.{micros // 1000:03d}Z"
    return f"{text}.{micros:06d}Z"


@functools.singledispatch
def _to_instant(value: object) -> datetime:
    raise TypeError(f"Cannot format {type(value).__name__} as a timestamp")


@_to_instant.register
def _(value: datetime) -> datetime:
    return value


@_to_instant.register
def _(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def format_timestamp(
    value: datetime | date | None,
    messages: MessageSource,
    locale: str,
) -> str:
    """Render a nullable instant or calendar date for display.

    ``None`` becomes the localized "not applicable" text for *locale*.
    """
    if value is None:
        return localize(messages, locale, Display.VALUE_NOT_APPLICABLE)
    return format_instant(_to_instant(value))
