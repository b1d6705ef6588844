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
"""File-system utilities for local database storage figures."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

_DISK_UNITS = (("GB", 1000**3), ("MB", 1000**2), ("KB", 1000))


def directory_size(path: str | Path) -> int:
    """Total size in bytes of all regular files under *path*.

    Symlinks are not followed.  A missing path has size ``0``; a plain file
    reports its own size.
    """
    path = Path(path)
    if path.is_symlink() or not path.exists():
        return 0
    if path.is_file():
        return path.stat().st_size

    total = 0
    stack = [path]
    while stack:
        current = stack.pop()
        try:
            entries = list(os.scandir(current))
        except FileNotFoundError:
            continue
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                stack.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                total += entry.stat(follow_symlinks=False).st_size
    return total


def disk_space_remaining(path: str | Path) -> int:
    """Free bytes on the volume holding *path*, or ``-1`` if it does not exist."""
    path = Path(path)
    if not path.exists():
        return -1
    return shutil.disk_usage(path).free


def format_disk_size(size: int) -> str:
    """Render a byte count with decimal units, e.g. ``12300000 -> "12.3 MB"``.

    Raises:
        ValueError: If *size* is negative.
    """
    if size < 0:
        raise ValueError(f"disk size must not be negative: {size}")
    for unit, factor in _DISK_UNITS:
        if size >= factor:
            scaled = f"{size / factor:.2f}".rstrip("0").rstrip(".")
            return f"{scaled} {unit}"
    return f"{size} bytes"
