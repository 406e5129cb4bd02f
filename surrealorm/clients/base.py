##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
This module defines the abstract base class for the database clients SurrealORM talks to.

The ORM never speaks the wire protocol itself. Everything it needs from the
database goes through the small set of coroutines defined by `DatabaseClient`,
and concrete clients (e.g. `SurrealDBClient`) adapt a real driver to it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DatabaseClient(ABC):
    """
    Base class for all database clients supported in SurrealORM.

    Methods:
        connect: Open a connection to the database at a URL.
        signin: Authenticate with a set of credentials.
        use: Select the namespace and database queries run against.
        query: Run a SurrealQL query and return its statement results.
        create: Create a record in a table.
        update: Replace the content of a record.
        delete: Delete a record.
        ping: Check that the connection is alive.
        close: Close the connection.
    """

    @abstractmethod
    async def connect(self, url: str):
        """
        Open a connection to the database.

        Args:
            url: The URL of the database endpoint.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `connect` method.")

    @abstractmethod
    async def signin(self, credentials: Dict[str, str]) -> Any:
        """
        Authenticate with the database.

        Args:
            credentials: The username and password, plus the namespace and
                database for scoped users.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `signin` method.")

    @abstractmethod
    async def use(self, namespace: str, database: str):
        """
        Select the namespace and database for subsequent requests.

        Args:
            namespace: The namespace to use.
            database: The database to use.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `use` method.")

    @abstractmethod
    async def query(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Run a SurrealQL query.

        Args:
            query: The query text.
            params: Values bound to the `$name` parameters of the query.

        Returns:
            One entry per statement: either a `{"result": ...}` envelope or
            the statement's rows.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `query` method.")

    @abstractmethod
    async def create(self, table: str, payload: Dict[str, Any]) -> Any:
        """
        Create a record in `table`.

        Returns:
            The created record(s), each including its `id`.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `create` method.")

    @abstractmethod
    async def update(self, record_id: Any, payload: Dict[str, Any]) -> Any:
        """
        Replace the content of the record `record_id`.

        Returns:
            The updated record.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement an `update` method.")

    @abstractmethod
    async def delete(self, record_id: Any) -> Any:
        """
        Delete the record `record_id`.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `delete` method.")

    @abstractmethod
    async def ping(self):
        """
        Check that the connection is alive. Raises if it isn't.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `ping` method.")

    @abstractmethod
    async def close(self):
        """
        Close the connection.
        """
        raise NotImplementedError("Subclasses of `DatabaseClient` must implement a `close` method.")
