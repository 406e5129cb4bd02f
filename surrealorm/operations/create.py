##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other SurrealORM
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to SurrealORM.
##############################################################################

"""
The `create` operation.
"""

import logging

from surrealorm.clients.base import DatabaseClient
from surrealorm.exceptions import RecordCreationError
from surrealorm.query import E, merge_record


LOG = logging.getLogger(__name__)


async def create(client: DatabaseClient, entity: E) -> E:
    """
    Insert a new record built from `entity` into the entity's table.

    The entity is only modified once the database has answered: its `id` is
    set from the created record and every returned field is merged onto it,
    so defaults computed by the database win.

    Args:
        client: The database client.
        entity: The entity to create.

    Returns:
        The same entity, now holding its record id.

    Raises:
        RecordCreationError: If the database returned no record.
    """
    table = type(entity).get_table_name()
    payload = entity.serialize()
    LOG.debug(f"Creating a {table} record with payload: {payload}")

    result = await client.create(table, payload)
    if isinstance(result, dict):
        records = [result]
    else:
        records = list(result or [])
    if not records:
        raise RecordCreationError(f"Failed to create {table} record")

    record = records[0]
    entity.id = record["id"]
    merge_record(entity, record)
    LOG.debug(f"Created {table} record '{entity.id}'.")
    return entity
