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
"""Process runtime facts and the randomness source, read from the live interpreter."""

from __future__ import annotations

import codecs
import locale
import os
import platform
import secrets
import sys
import threading
from collections.abc import Callable

import psutil


def _compact(value: str) -> str:
    return " ".join(value.split())


class ProcessRuntime:
    """``RuntimeFacts`` for the current Python process.

    Memory figures are bytes: *free* is memory available to the process on
    this host, *allocated* the resident set size of the process, and *max*
    the physical memory of the host.
    """

    _SYSTEM_PROPERTIES: dict[str, Callable[[], str]] = {
        "python.vendor": platform.python_implementation,
        "python.name": lambda: sys.implementation.name,
        "python.version": platform.python_version,
        "python.runtime.version": lambda: _compact(sys.version),
        "python.home": lambda: sys.base_prefix,
        "os.name": platform.system,
        "os.version": platform.release,
        "os.arch": platform.machine,
    }

    def __init__(self) -> None:
        self._process = psutil.Process(os.getpid())

    def free_memory(self) -> int:
        return int(psutil.virtual_memory().available)

    def allocated_memory(self) -> int:
        return int(self._process.memory_info().rss)

    def max_memory(self) -> int:
        return int(psutil.virtual_memory().total)

    def active_thread_count(self) -> int:
        return threading.active_count()

    def system_property(self, name: str) -> str | None:
        """Return a named interpreter/OS property, or ``None`` when unknown."""
        reader = self._SYSTEM_PROPERTIES.get(name)
        if reader is None:
            return None
        return reader() or None

    def default_charset(self) -> str:
        return codecs.lookup(locale.getpreferredencoding(False)).name


class SecureRandomService:
    """``RandomService`` backed by :mod:`secrets`."""

    def algorithm(self) -> str:
        return f"{secrets.SystemRandom.__name__} (os.urandom)"
