##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
Module of all SurrealORM-specific exception types.

Errors raised by the underlying database client while running a query are not
wrapped by anything in here; they reach the caller exactly as the client raised
them.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "SurrealORMError",
    "DatabaseConnectionError",
    "NotConnectedError",
    "DeclarationError",
    "NotUniqueFieldError",
    "MissingIdentifierError",
    "RecordCreationError",
    "ClientNotSupportedError",
    "ConfigurationError",
    "QueryError",
)


class SurrealORMError(Exception):
    """
    Base class for every exception raised by SurrealORM itself.
    """


class DatabaseConnectionError(SurrealORMError, ConnectionError):
    """
    Exception to signal that connecting, signing in, or selecting the
    namespace/database failed. The original error is chained as `__cause__`.
    """

    def __init__(self, message):
        super().__init__(message)


class NotConnectedError(SurrealORMError):
    """
    Exception to signal that an operation was attempted while no live
    database client is held.
    """

    def __init__(self, message: str = "Not connected to SurrealDB"):
        super().__init__(message)


class DeclarationError(SurrealORMError):
    """
    Exception to signal that an entity type was used without being
    declared with the `entity` decorator.
    """

    def __init__(self, message):
        super().__init__(message)


class NotUniqueFieldError(SurrealORMError):
    """
    Exception to signal that `find_unique` was given a field that is not
    declared with `unique=True`.

    Attributes:
        field: The offending field name.
        entity_name: The name of the entity class that was queried.
    """

    def __init__(self, field: str, entity_name: str):
        self.field = field
        self.entity_name = entity_name
        super().__init__(
            f"Field '{field}' of entity '{entity_name}' is not marked as unique. "
            "Only fields declared with Property(unique=True) can be used with find_unique."
        )


class MissingIdentifierError(SurrealORMError):
    """
    Exception to signal that an update or delete was requested for an
    entity that has no `id`.

    Attributes:
        action: The operation that was refused (e.g. "update").
    """

    def __init__(self, action: str, entity_name: str):
        self.action = action
        self.entity_name = entity_name
        super().__init__(f"Cannot {action} {entity_name} entity without id")


class RecordCreationError(SurrealORMError):
    """
    Exception to signal that the database did not return a record for a create.
    """

    def __init__(self, message):
        super().__init__(message)


class ClientNotSupportedError(SurrealORMError):
    """
    Exception to signal that the requested database client is not supported.
    """

    def __init__(self, message):
        super().__init__(message)


class ConfigurationError(SurrealORMError):
    """
    Exception to signal that the connection options are incomplete or invalid.
    """

    def __init__(self, message):
        super().__init__(message)


class QueryError(SurrealORMError):
    """
    Exception to signal that the database reported an error for a statement.
    The database's own message is used verbatim.
    """

    def __init__(self, message):
        super().__init__(message)
