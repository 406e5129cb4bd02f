##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `clients` package contains the database clients SurrealORM can drive.

Modules:
    base.py: Houses `DatabaseClient`, the interface every client implements.
    client_factory.py: Houses `ClientFactory` and the shared `client_factory` instance.
    surrealdb_client.py: Houses `SurrealDBClient`, built on the `surrealdb` SDK.
"""

from surrealorm.clients.base import DatabaseClient
from surrealorm.clients.client_factory import ClientFactory, client_factory
from surrealorm.clients.surrealdb_client import SurrealDBClient


__all__ = ["ClientFactory", "DatabaseClient", "SurrealDBClient", "client_factory"]
