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
"""Unified exception hierarchy for pwm-about.

All exceptions raised by this package inherit from PwmException, enabling
a single handler for every diagnostic failure.

Categories:
- InfrastructureException: database, storage, and host subsystem failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class PwmException(Exception):
    """Base exception for all pwm-about errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "DB_DEBUG").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PwmException):
    """Failures in host subsystems the aggregator reads from."""


class DatabaseException(InfrastructureException):
    """The database service could not be queried."""
