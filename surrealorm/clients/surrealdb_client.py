##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Database client backed by the official `surrealdb` Python SDK.
"""

import logging
from typing import Any, Dict, List, Optional

from surrealdb import AsyncSurreal

from surrealorm.clients.base import DatabaseClient
from surrealorm.exceptions import NotConnectedError, QueryError


LOG = logging.getLogger(__name__)


class SurrealDBClient(DatabaseClient):
    """
    Adapter exposing an `AsyncSurreal` connection as a `DatabaseClient`.

    The SDK connection is created by `connect`, since the SDK picks its
    transport (WebSocket or HTTP) from the URL scheme.

    Attributes:
        url (Optional[str]): The URL passed to `connect`.
    """

    def __init__(self):
        self.url: Optional[str] = None
        self._connection = None

    @property
    def connection(self):
        """The underlying SDK connection."""
        if self._connection is None:
            raise NotConnectedError("The SurrealDB client has not been connected")
        return self._connection

    async def connect(self, url: str):
        self.url = url
        self._connection = AsyncSurreal(url)
        await self._connection.connect()
        LOG.debug(f"Opened SurrealDB connection to {url}.")

    async def signin(self, credentials: Dict[str, str]) -> Any:
        return await self.connection.signin(credentials)

    async def use(self, namespace: str, database: str):
        await self.connection.use(namespace, database)

    async def query(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Run a query and return the statement envelopes.

        Raises:
            QueryError: If the database reports an error for the request or
                any of its statements.
        """
        response = await self.connection.query_raw(query, params or {})
        if "error" in response:
            raise QueryError(response["error"].get("message", str(response["error"])))

        statements = response.get("result") or []
        for statement in statements:
            if isinstance(statement, dict) and statement.get("status") == "ERR":
                raise QueryError(str(statement.get("result")))
        return statements

    async def create(self, table: str, payload: Dict[str, Any]) -> Any:
        return await self.connection.create(table, payload)

    async def update(self, record_id: Any, payload: Dict[str, Any]) -> Any:
        return await self.connection.update(record_id, payload)

    async def delete(self, record_id: Any) -> Any:
        return await self.connection.delete(record_id)

    async def ping(self):
        # The SDK has no dedicated ping; a version request round-trips the connection
        await self.connection.version()

    async def close(self):
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            LOG.debug(f"Closed SurrealDB connection to {self.url}.")
