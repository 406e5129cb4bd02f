##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
This module houses `SurrealORM`, the entry point applications use to talk to SurrealDB.

`SurrealORM` owns a single database client and its connection lifecycle. Its
CRUD methods check that a client is held and then delegate to the functions in
`surrealorm.operations`, passing that client along.

Example:
    ```python
    orm = SurrealORM({"url": "ws://localhost:8000/rpc", "namespace": "test", "database": "test"})
    await orm.connect("root")
    user = await orm.find_unique(User, {"email": "user@example.com"})
    await orm.disconnect()
    ```

A `SurrealORM` instance has no internal locking: `connect` replaces the held
client, so it must not run concurrently with itself or with another operation
on the same instance.
"""

import logging
from types import TracebackType
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from surrealorm import operations
from surrealorm.clients import ClientFactory, DatabaseClient, client_factory
from surrealorm.common.enums import ConnectionMode, ConnectionState
from surrealorm.config import ORMOptions
from surrealorm.entity import BaseEntity
from surrealorm.exceptions import DatabaseConnectionError, NotConnectedError
from surrealorm.query import E, build_index_statements


LOG = logging.getLogger(__name__)


class SurrealORM:
    """
    Connection manager and operation surface of SurrealORM.

    Attributes:
        options (ORMOptions): The connection options.
        database (str): The database this instance is scoped to.
        client (Optional[DatabaseClient]): The live database client, or None when disconnected.
        state (ConnectionState): Where this instance is in its connection lifecycle.

    Methods:
        connect: Create a client, sign in, and select the namespace and database.
        disconnect: Close and drop the client.
        is_connected: Probe the client and report whether it's alive.
        create: Create a record from an entity.
        find_unique: Find one entity by unique fields.
        find_many: Find every entity matching field values.
        find_all: Find every entity of a class.
        update: Write an entity's fields to its record.
        delete: Delete an entity's record.
        upsert: Update the record matching the given fields, or create it.
        raw: Run a SurrealQL query as-is.
        ensure_indexes: Define the indexes declared by an entity's properties.
    """

    def __init__(self, options: Union[ORMOptions, Dict[str, Any]], factory: Optional[ClientFactory] = None):
        """
        Initialize the ORM. No connection is made until `connect` is awaited.

        Args:
            options: The connection options, as `ORMOptions` or a dictionary
                with `url`, `namespace`, `database`, and optionally `username`,
                `password`, and `client`.
            factory: The factory used to create database clients. Defaults to
                the shared `client_factory`.
        """
        self.options: ORMOptions = options if isinstance(options, ORMOptions) else ORMOptions.from_dict(options)
        self.database: str = self.options.database
        self.client: Optional[DatabaseClient] = None
        self.state: ConnectionState = ConnectionState.DISCONNECTED
        self._factory: ClientFactory = factory or client_factory

    def _credentials(self, mode: ConnectionMode) -> Dict[str, str]:
        """
        Build the sign-in credentials for a connection mode.

        Args:
            mode: The scope of the user signing in.

        Returns:
            The credentials to pass to the client's `signin`.
        """
        credentials = {"username": self.options.username, "password": self.options.password}
        if mode in (ConnectionMode.NAMESPACE, ConnectionMode.DATABASE):
            credentials["namespace"] = self.options.namespace
        if mode is ConnectionMode.DATABASE:
            credentials["database"] = self.options.database
        return credentials

    async def connect(self, mode: Union[ConnectionMode, str] = ConnectionMode.ROOT):
        """
        Connect to SurrealDB, sign in, and select the namespace and database.

        Any client held from a previous connection is closed first.

        Args:
            mode: Which kind of user to sign in as: "root", "namespace", or "database".

        Raises:
            DatabaseConnectionError: If the mode is invalid or any step fails. The
                half-open client is discarded and the original error is chained.
        """
        await self.disconnect()

        try:
            mode = ConnectionMode(mode)
        except ValueError as exc:
            raise DatabaseConnectionError(f"Invalid connection type '{mode}'") from exc

        self.state = ConnectionState.CONNECTING
        client = None
        try:
            client = self._factory.create(self.options.client)
            await client.connect(self.options.url)
            await client.signin(self._credentials(mode))
            await client.use(self.options.namespace, self.options.database)
        except Exception as exc:
            self.state = ConnectionState.DISCONNECTED
            if client is not None:
                await self._close_quietly(client)
            raise DatabaseConnectionError(f"Failed to connect to SurrealDB: {exc}") from exc

        self.client = client
        self.state = ConnectionState.CONNECTED
        LOG.info(
            f"Connected to SurrealDB at {self.options.url} as a {mode.value} user "
            f"(namespace '{self.options.namespace}', database '{self.options.database}')."
        )

    @staticmethod
    async def _close_quietly(client: DatabaseClient):
        """
        Close a client that is being discarded after a failure.
        """
        try:
            await client.close()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            LOG.warning(f"Failed to close discarded SurrealDB client: {exc}")

    async def disconnect(self):
        """
        Close the client if one is held. Does nothing when already disconnected.
        """
        client = self.client
        self.client = None
        self.state = ConnectionState.DISCONNECTED
        if client is not None:
            await client.close()
            LOG.info(f"Disconnected from SurrealDB at {self.options.url}.")

    async def is_connected(self) -> bool:
        """
        Check whether the client is alive by pinging it.

        A failed ping discards the client.

        Returns:
            True if a client is held and answered the ping, False otherwise.
        """
        if self.client is None:
            return False

        try:
            await self.client.ping()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            LOG.warning(f"SurrealDB ping failed, dropping the connection: {exc}")
            self.client = None
            self.state = ConnectionState.DISCONNECTED
            return False

        return True

    def _require_client(self) -> DatabaseClient:
        """
        Get the live client.

        Raises:
            NotConnectedError: If no client is held.
        """
        if self.client is None:
            raise NotConnectedError()
        return self.client

    async def create(self, entity: E) -> E:
        """
        Create a new record from `entity`. See `operations.create`.
        """
        return await operations.create(self._require_client(), entity)

    async def find_unique(self, entity_class: Type[E], where: Mapping[str, Any]) -> Optional[E]:
        """
        Find a single entity by unique field values. See `operations.find_unique`.
        """
        return await operations.find_unique(self._require_client(), entity_class, where)

    async def find_many(self, entity_class: Type[E], where: Mapping[str, Any]) -> List[E]:
        """
        Find every entity matching the field values. See `operations.find_many`.
        """
        return await operations.find_many(self._require_client(), entity_class, where)

    async def find_all(self, entity_class: Type[E]) -> List[E]:
        """
        Find every entity of a class. See `operations.find_all`.
        """
        return await operations.find_all(self._require_client(), entity_class)

    async def update(self, entity: E) -> E:
        """
        Write the entity's fields to its record. See `operations.update`.
        """
        return await operations.update(self._require_client(), entity)

    async def delete(self, entity: BaseEntity):
        """
        Delete the entity's record. See `operations.delete`.
        """
        await operations.delete(self._require_client(), entity)

    async def upsert(self, entity: E, *unique_fields: str) -> E:
        """
        Update the record matching `unique_fields`, or create one. See `operations.upsert`.
        """
        return await operations.upsert(self._require_client(), entity, *unique_fields)

    async def raw(self, query: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Run a SurrealQL query as-is. See `operations.raw`.
        """
        return await operations.raw(self._require_client(), query, params)

    async def ensure_indexes(self, entity_class: Type[BaseEntity]) -> List[str]:
        """
        Define an index for every property declared with `unique` or `index`.

        Unique indexes make the database reject the duplicates that concurrent
        upserts on the same key could otherwise create.

        Args:
            entity_class: The entity class whose indexes should exist.

        Returns:
            The statements that were run.
        """
        client = self._require_client()
        statements = build_index_statements(entity_class)
        for statement in statements:
            LOG.debug(f"Defining index: {statement}")
            await client.query(statement, {})
        return statements

    async def __aenter__(self) -> "SurrealORM":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ):
        await self.disconnect()
