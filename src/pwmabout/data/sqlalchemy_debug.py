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
"""SQLAlchemy-backed database service exposing driver and product facts."""

from __future__ import annotations

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from pwmabout.about.property import AboutProperty
from pwmabout.kernel.exceptions import DatabaseException


class SqlAlchemyDatabaseService:
    """``DatabaseService`` over a SQLAlchemy :class:`~sqlalchemy.Engine`.

    The product version is only known once the dialect has connected, so
    every call opens (and returns) one pooled connection.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def connection_debug_properties(self) -> dict[AboutProperty, str]:
        try:
            with self._engine.connect():
                pass
        except SQLAlchemyError as exc:
            raise DatabaseException(
                "unable to connect to database",
                code="DB_DEBUG",
                context={"url": self._engine.url.render_as_string(hide_password=True)},
            ) from exc

        dialect = self._engine.dialect
        properties: dict[AboutProperty, str] = {
            AboutProperty.database_driverName: f"{dialect.name}+{dialect.driver}",
            AboutProperty.database_databaseProductName: dialect.name,
        }

        dbapi = getattr(dialect, "loaded_dbapi", None) or getattr(dialect, "dbapi", None)
        driver_version = getattr(dbapi, "__version__", None)
        if driver_version:
            properties[AboutProperty.database_driverVersion] = str(driver_version)

        version_info = dialect.server_version_info
        if version_info:
            properties[AboutProperty.database_databaseProductVersion] = ".".join(str(part) for part in version_info)

        return properties
