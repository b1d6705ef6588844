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
"""Enumerations shared between the host and the About page."""

from __future__ import annotations

from enum import Enum


class ApplicationFlag(Enum):
    """Flags describing how the host application was launched."""

    Appliance = "Appliance"
    Docker = "Docker"
    ManageHttps = "ManageHttps"
    NoFileLock = "NoFileLock"
    CommandLineInstance = "CommandLineInstance"


class BlockAlgorithm(Enum):
    """Symmetric block algorithms the secure service can default to."""

    AES = ("AES", "AES")
    AES128_HMAC256 = ("AES128_HMAC256", "AES128+hmac256")
    AES128_GCM = ("AES128_GCM", "AES128-GCM")
    AES256_GCM = ("AES256_GCM", "AES256-GCM")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label


class HashAlgorithm(Enum):
    """Digest algorithms, valued by their :mod:`hashlib` names."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
