##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `operations` package holds the CRUD operations of SurrealORM.

Each operation is a plain coroutine function that takes the database client as
its first argument. `SurrealORM` delegates to these with the client it holds.

Modules:
    create.py: Insert a new record.
    find.py: `find_unique`, `find_many`, and `find_all`.
    update.py: Replace a record's content.
    delete.py: Delete a record.
    upsert.py: Update on a key match, create otherwise.
    raw.py: Pass a query straight to the client.
"""

from surrealorm.operations.create import create
from surrealorm.operations.delete import delete
from surrealorm.operations.find import find_all, find_many, find_unique
from surrealorm.operations.raw import raw
from surrealorm.operations.update import update
from surrealorm.operations.upsert import upsert


__all__ = ["create", "delete", "find_all", "find_many", "find_unique", "raw", "update", "upsert"]
