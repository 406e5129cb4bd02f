##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Selects and instantiates the database client `SurrealORM` connects with.

Clients are looked up by the `client` connection option. The built-in
`SurrealDBClient` answers to `surrealdb` and to the URL schemes the SDK
accepts, so `client: wss` works as well. Clients shipped by other packages
are found through the `surrealorm.clients` entry point group the first time
a name isn't registered.
"""

import logging
from importlib.metadata import entry_points
from typing import Dict, List, Type

from surrealorm.clients.base import DatabaseClient
from surrealorm.clients.surrealdb_client import SurrealDBClient
from surrealorm.exceptions import ClientNotSupportedError


LOG = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "surrealorm.clients"
SURREALDB_SCHEMES = ("ws", "wss", "http", "https")


class ClientFactory:
    """
    Registry of the database clients `SurrealORM` can connect with.

    Attributes:
        _clients (Dict[str, Type[DatabaseClient]]): Client classes by name.
        _aliases (Dict[str, str]): Alternate names (URL schemes) mapped to client names.
        _plugins_loaded (bool): Whether the entry point group has been read.

    Methods:
        register: Register a client class under a name and optional aliases.
        resolve: Get the client class for a name or alias.
        create: Instantiate the client for a name or alias.
        names: The names of every registered client.
    """

    def __init__(self):
        self._clients: Dict[str, Type[DatabaseClient]] = {}
        self._aliases: Dict[str, str] = {}
        self._plugins_loaded: bool = False
        self.register("surrealdb", SurrealDBClient, aliases=SURREALDB_SCHEMES)

    def register(self, name: str, client_class: Type[DatabaseClient], aliases=()):
        """
        Register a client class.

        Args:
            name: The name used in the `client` connection option.
            client_class: A `DatabaseClient` subclass, instantiated without arguments.
            aliases: Other names that select the same client.

        Raises:
            TypeError: If `client_class` isn't a `DatabaseClient` subclass.
        """
        if not (isinstance(client_class, type) and issubclass(client_class, DatabaseClient)):
            raise TypeError(f"{client_class} must inherit from DatabaseClient")

        self._clients[name] = client_class
        for alias in aliases:
            self._aliases[alias] = name
        LOG.debug(f"Registered database client '{name}' (aliases: {list(aliases)}).")

    def _load_plugins(self):
        """
        Register the clients advertised in the `surrealorm.clients` entry point
        group. Runs once per factory; a plugin that fails to load is skipped.
        """
        if self._plugins_loaded:
            return
        self._plugins_loaded = True

        for entry_point in entry_points(group=ENTRY_POINT_GROUP):
            try:
                self.register(entry_point.name, entry_point.load())
                LOG.info(f"Loaded database client plugin '{entry_point.name}'.")
            except Exception as exc:  # pylint: disable=broad-exception-caught
                LOG.warning(f"Failed to load database client plugin '{entry_point.name}': {exc}")

    def names(self) -> List[str]:
        """Get the names of every registered client, plugins included."""
        self._load_plugins()
        return sorted(self._clients)

    def resolve(self, name: str) -> Type[DatabaseClient]:
        """
        Get the client class registered under `name` or one of its aliases.

        Args:
            name: A client name or alias.

        Returns:
            The client class.

        Raises:
            ClientNotSupportedError: If no client answers to `name`.
        """
        canonical = self._aliases.get(name, name)
        if canonical not in self._clients:
            self._load_plugins()
            canonical = self._aliases.get(name, name)

        client_class = self._clients.get(canonical)
        if client_class is None:
            raise ClientNotSupportedError(
                f"Database client '{name}' is not supported. Available clients: {', '.join(self.names())}"
            )
        return client_class

    def create(self, name: str) -> DatabaseClient:
        """
        Instantiate the client registered under `name` or one of its aliases.

        Args:
            name: A client name or alias.

        Returns:
            A new, unconnected client.
        """
        client = self.resolve(name)()
        LOG.debug(f"Created database client '{name}'.")
        return client


client_factory = ClientFactory()
