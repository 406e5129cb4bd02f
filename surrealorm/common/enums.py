##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""This module provides enumerations for the connection manager."""
from enum import Enum


__all__ = ("ConnectionMode", "ConnectionState")


class ConnectionMode(str, Enum):
    """
    Enum for the credential scope used when signing in.

    Attributes:
        ROOT (str): Sign in as a root user; no namespace or database is sent.
        NAMESPACE (str): Sign in as a namespace user.
        DATABASE (str): Sign in as a database user of the configured namespace.
    """

    ROOT = "root"
    NAMESPACE = "namespace"
    DATABASE = "database"


class ConnectionState(Enum):
    """
    Enum for the lifecycle of a `SurrealORM` instance.

    Attributes:
        DISCONNECTED: No client handle is held.
        CONNECTING: A client handle is being set up by `connect`.
        CONNECTED: A client handle is signed in and scoped.
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
