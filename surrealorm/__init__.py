##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
SurrealORM: declarative entities and CRUD helpers for SurrealDB.

This module re-exports the public surface of the package so applications can
write `from surrealorm import SurrealORM, BaseEntity, entity, Property`.
"""

import os

from surrealorm.connection import SurrealORM
from surrealorm.decorators import Property, declare_entity, declare_property, entity
from surrealorm.entity import BaseEntity
from surrealorm.exceptions import (
    ClientNotSupportedError,
    ConfigurationError,
    DatabaseConnectionError,
    DeclarationError,
    MissingIdentifierError,
    NotConnectedError,
    NotUniqueFieldError,
    QueryError,
    RecordCreationError,
    SurrealORMError,
)
from surrealorm.operations import create, delete, find_all, find_many, find_unique, raw, update, upsert


__version__ = "0.4.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")

__all__ = (
    "BaseEntity",
    "ClientNotSupportedError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "DeclarationError",
    "MissingIdentifierError",
    "NotConnectedError",
    "NotUniqueFieldError",
    "Property",
    "QueryError",
    "RecordCreationError",
    "SurrealORM",
    "SurrealORMError",
    "VERSION",
    "create",
    "declare_entity",
    "declare_property",
    "delete",
    "entity",
    "find_all",
    "find_many",
    "find_unique",
    "raw",
    "update",
    "upsert",
)
